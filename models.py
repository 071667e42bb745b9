from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


def js_number(value):
    """Integral floats as ints, so 80.0 is written as 80."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class StudentRecord(BaseModel):
    """A student's stored record, persisted under its id.

    ``att_total`` and ``hw_total`` are stored as ``attTotal`` / ``hwTotal``.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    password: str
    test: Optional[float] = None
    att: int = 0
    att_total: int = Field(0, alias="attTotal")
    hw: int = 0
    hw_total: int = Field(0, alias="hwTotal")
    academic: Optional[float] = None

    def to_json(self) -> dict:
        data = self.model_dump(by_alias=True)
        data["test"] = js_number(data["test"])
        data["academic"] = js_number(data["academic"])
        return data


class StudentIdBody(BaseModel):
    """Request body carrying a student id; numeric ids are used as their string key."""

    id: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def numeric_id_as_key(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(js_number(value))
        return value


class SignupRequest(StudentIdBody):
    # Presence is checked by the route so that "" counts as missing too.
    name: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(StudentIdBody):
    password: Optional[str] = None


class LoginResponse(BaseModel):
    id: str
    name: str


class ScoreUpdate(StudentIdBody):
    id: str
    score: float = Field(allow_inf_nan=False)


class AttendanceUpdate(StudentIdBody):
    id: str
    present: int
    total: int


class HomeworkUpdate(StudentIdBody):
    id: str
    done: int
    total: int
