import pytest
from fastapi.testclient import TestClient
from main import app
from storage import InMemoryRecordStore, JsonFileRecordStore, get_store


@pytest.fixture(autouse=True)
def store(tmp_path):
    """Redirect all record reads/writes to a JSON file in a temporary directory."""
    file_store = JsonFileRecordStore(str(tmp_path / "students.json"))
    app.dependency_overrides[get_store] = lambda: file_store
    yield file_store
    app.dependency_overrides.clear()


@pytest.fixture()
def memory_store():
    mem = InMemoryRecordStore()
    app.dependency_overrides[get_store] = lambda: mem
    return mem


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture()
def signed_up(client):
    client.post("/api/students/signup", json={"id": "s1", "name": "Alice", "password": "pw1"})
    return "s1"
