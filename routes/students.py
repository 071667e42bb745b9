from fastapi import APIRouter, Depends
from errors import ConflictError, InvalidInputError, NotFoundError, UnauthorizedError
from models import LoginRequest, LoginResponse, SignupRequest, StudentRecord
from storage import RecordStore, get_store
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/students")


@router.post("/signup")
def signup(body: SignupRequest, store: RecordStore = Depends(get_store)):
    logger.info("POST /students/signup: id: %s", body.id)
    if not body.id or not body.name or not body.password:
        logger.warning("POST /students/signup: missing fields")
        raise InvalidInputError("Missing fields")
    if store.exists(body.id):
        logger.warning("POST /students/signup: student %s already exists", body.id)
        raise ConflictError("Student already exists")

    store.set(body.id, StudentRecord(name=body.name, password=body.password))
    logger.info("POST /students/signup: created student %s", body.id)
    return {"message": "Student created"}


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, store: RecordStore = Depends(get_store)):
    logger.info("POST /students/login: id: %s", body.id)
    record = store.get(body.id) if body.id is not None else None
    if record is None or record.password != body.password:
        logger.warning("POST /students/login: invalid credentials for %s", body.id)
        raise UnauthorizedError("Invalid credentials")
    return LoginResponse(id=body.id, name=record.name)


@router.get("/{student_id}")
def get_student(student_id: str, store: RecordStore = Depends(get_store)):
    record = store.get(student_id)
    if record is None:
        logger.warning("GET /students/%s: not found", student_id)
        raise NotFoundError("Not found")
    return record.to_json()


@router.get("")
def get_students(store: RecordStore = Depends(get_store)):
    records = store.list_all()
    logger.info("GET /students: returned %d students", len(records))
    return {sid: r.to_json() for sid, r in records.items()}
