import json
import logging
import os
import tempfile
import threading
from typing import Dict, Optional, Protocol

from pydantic import ValidationError

from config import get_settings
from models import StudentRecord

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """Key-value access to student records, keyed by student id."""

    def get(self, student_id: str) -> Optional[StudentRecord]: ...

    def set(self, student_id: str, record: StudentRecord) -> None: ...

    def list_all(self) -> Dict[str, StudentRecord]: ...

    def exists(self, student_id: str) -> bool: ...


class InMemoryRecordStore:
    def __init__(self, records: Optional[Dict[str, StudentRecord]] = None):
        self._records: Dict[str, StudentRecord] = {}
        for student_id, record in (records or {}).items():
            self.set(student_id, record)

    def get(self, student_id: str) -> Optional[StudentRecord]:
        record = self._records.get(student_id)
        return record.model_copy() if record is not None else None

    def set(self, student_id: str, record: StudentRecord) -> None:
        self._records[student_id] = record.model_copy()

    def list_all(self) -> Dict[str, StudentRecord]:
        return {sid: r.model_copy() for sid, r in self._records.items()}

    def exists(self, student_id: str) -> bool:
        return student_id in self._records


class JsonFileRecordStore:
    """Records kept in one JSON document, read and rewritten whole.

    A missing or unparsable document reads as empty and the next write
    replaces it. A single invalid record is skipped on read but kept on write.
    """

    def __init__(self, path: str):
        self.path = path
        self._lock = threading.RLock()

    def read_raw(self) -> dict:
        """The document as stored. Unparsable or non-object content reads as empty."""
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
            data = json.loads(raw or "{}")
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, treating it as empty: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("%s does not hold an id -> record mapping, treating it as empty", self.path)
            return {}
        return data

    def load(self) -> Dict[str, StudentRecord]:
        """Valid records only; an invalid record is skipped, not the whole file."""
        records = {}
        for sid, item in self.read_raw().items():
            try:
                records[sid] = StudentRecord.model_validate(item)
            except ValidationError as e:
                logger.warning("Skipping invalid record %s in %s: %s", sid, self.path, e)
        return records

    def _write(self, data: dict) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".students-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get(self, student_id: str) -> Optional[StudentRecord]:
        return self.load().get(student_id)

    def set(self, student_id: str, record: StudentRecord) -> None:
        # Other entries are rewritten as stored, invalid ones included.
        with self._lock:
            data = self.read_raw()
            data[student_id] = record.to_json()
            self._write(data)

    def list_all(self) -> Dict[str, StudentRecord]:
        return self.load()

    def exists(self, student_id: str) -> bool:
        return student_id in self.read_raw()


_stores: Dict[str, JsonFileRecordStore] = {}


def get_store() -> RecordStore:
    """FastAPI dependency: the file store at the configured path."""
    path = get_settings().data_file
    if path not in _stores:
        _stores[path] = JsonFileRecordStore(path)
    return _stores[path]
