from fastapi import APIRouter, Depends
from errors import InvalidInputError, NotFoundError
from models import AttendanceUpdate, HomeworkUpdate, ScoreUpdate, StudentRecord
from scoring import calc_academic
from storage import RecordStore, get_store
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/teacher")


def _load_student(store: RecordStore, student_id: str, endpoint: str) -> StudentRecord:
    record = store.get(student_id)
    if record is None:
        logger.warning("POST /teacher/%s: student %s not found", endpoint, student_id)
        raise NotFoundError("Student not found")
    return record


def _save_scored(store: RecordStore, student_id: str, record: StudentRecord, endpoint: str) -> dict:
    calc_academic(record)
    store.set(student_id, record)
    logger.info("POST /teacher/%s: student %s academic now %s", endpoint, student_id, record.academic)
    return record.to_json()


def _valid_count(done: int, total: int) -> bool:
    return total > 0 and 0 <= done <= total


@router.post("/test")
def update_test(body: ScoreUpdate, store: RecordStore = Depends(get_store)):
    logger.info("POST /teacher/test: student: %s, score: %s", body.id, body.score)
    record = _load_student(store, body.id, "test")
    if body.score < 0 or body.score > 100:
        logger.warning("POST /teacher/test: score out of range: %s", body.score)
        raise InvalidInputError("Score must be 0–100")

    record.test = body.score
    return _save_scored(store, body.id, record, "test")


@router.post("/attendance")
def update_attendance(body: AttendanceUpdate, store: RecordStore = Depends(get_store)):
    logger.info("POST /teacher/attendance: student: %s, present: %d/%d", body.id, body.present, body.total)
    record = _load_student(store, body.id, "attendance")
    if not _valid_count(body.present, body.total):
        logger.warning("POST /teacher/attendance: bad values %d/%d", body.present, body.total)
        raise InvalidInputError("Bad attendance values")

    record.att = body.present
    record.att_total = body.total
    return _save_scored(store, body.id, record, "attendance")


@router.post("/homework")
def update_homework(body: HomeworkUpdate, store: RecordStore = Depends(get_store)):
    logger.info("POST /teacher/homework: student: %s, done: %d/%d", body.id, body.done, body.total)
    record = _load_student(store, body.id, "homework")
    if not _valid_count(body.done, body.total):
        logger.warning("POST /teacher/homework: bad values %d/%d", body.done, body.total)
        raise InvalidInputError("Bad homework values")

    record.hw = body.done
    record.hw_total = body.total
    return _save_scored(store, body.id, record, "homework")
