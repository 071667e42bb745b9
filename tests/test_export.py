import csv
import io
import openpyxl
from models import StudentRecord
from routes.export import COLUMNS, _build_rows


# ── pure unit tests for _build_rows ──────────────────────────────────────────

RECORDS = {
    "1": StudentRecord(name="Alice", password="secret", test=80, att=9, att_total=10, hw=4, hw_total=5, academic=8.3),
    "2": StudentRecord(name="Bob", password="hunter2"),
}


def test_build_rows_blank_for_missing_values():
    rows = _build_rows(RECORDS)
    assert rows[1]["test"] == ""
    assert rows[1]["academic"] == ""
    assert rows[1]["att"] == 0


def test_build_rows_never_include_password():
    for row in _build_rows(RECORDS):
        assert "password" not in row
        assert set(row) == set(COLUMNS)


def test_build_rows_preserves_store_order():
    rows = _build_rows(RECORDS)
    assert [r["id"] for r in rows] == ["1", "2"]
    assert rows[0]["attTotal"] == 10


# ── integration tests for export endpoints ───────────────────────────────────

def _populate(client):
    client.post("/api/students/signup", json={"id": "1", "name": "Dupont", "password": "pw"})
    client.post("/api/students/signup", json={"id": "2", "name": "Martin", "password": "pw"})
    client.post("/api/teacher/test", json={"id": "1", "score": 60})


def test_export_csv_empty(client):
    resp = client.get("/api/teacher/export/csv")
    assert resp.status_code == 200
    assert resp.text.strip() == ",".join(COLUMNS)


def test_export_csv_returns_csv(client):
    _populate(client)
    resp = client.get("/api/teacher/export/csv")
    assert resp.status_code == 200
    assert "text/csv" in resp.headers["content-type"]

    rows = list(csv.DictReader(io.StringIO(resp.text)))
    assert [r["name"] for r in rows] == ["Dupont", "Martin"]
    assert rows[0]["academic"] == "3"
    assert rows[1]["academic"] == ""
    assert "pw" not in resp.text


def test_export_xlsx_returns_xlsx(client):
    _populate(client)
    resp = client.get("/api/teacher/export/xlsx")
    assert resp.status_code == 200
    content_type = resp.headers["content-type"]
    assert "spreadsheetml" in content_type or "officedocument" in content_type

    wb = openpyxl.load_workbook(io.BytesIO(resp.content))
    ws = wb["Grades"]
    values = list(ws.iter_rows(values_only=True))
    assert list(values[0]) == COLUMNS
    assert values[1][1] == "Dupont"
    assert len(values) == 3
