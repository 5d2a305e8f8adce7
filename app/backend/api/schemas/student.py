# app/backend/api/schemas/student.py
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, field_validator, model_validator

from .common import RequestModel, ResponseModel, clean_text, invalid, parse_int, require_text


class StudentCreateRequest(RequestModel):
    student_number: Optional[str] = None
    name: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[int] = None
    major: Optional[str] = None
    class_name: Optional[str] = None
    contact: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("student_number", "name", "gender", "major", "class_name", "contact", "notes", mode="before")
    @classmethod
    def _trim(cls, value: Any) -> Any:
        return clean_text(value)

    @field_validator("age", mode="before")
    @classmethod
    def _age(cls, value: Any) -> Optional[int]:
        return parse_int(value, "Age", 0, 120)

    @model_validator(mode="after")
    def _required(self) -> "StudentCreateRequest":
        if not self.student_number or not self.name:
            raise invalid("Student number and name are required.")
        return self

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump()


class StudentUpdateRequest(RequestModel):
    """
    Sparse update. A field left out of the payload is not touched, null or ""
    clears it, anything else is trimmed and stored.
    """
    student_number: Optional[str] = None
    name: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[int] = None
    major: Optional[str] = None
    class_name: Optional[str] = None
    contact: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("student_number", mode="before")
    @classmethod
    def _student_number(cls, value: Any) -> Any:
        return require_text(value, "Student number cannot be empty.")

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value: Any) -> Any:
        return require_text(value, "Name cannot be empty.")

    @field_validator("gender", "major", "class_name", "contact", "notes", mode="before")
    @classmethod
    def _trim(cls, value: Any) -> Any:
        return clean_text(value)

    @field_validator("age", mode="before")
    @classmethod
    def _age(cls, value: Any) -> Optional[int]:
        return parse_int(value, "Age", 0, 120)

    def to_patch(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class StudentResponse(ResponseModel):
    id: UUID
    student_number: str
    name: str
    gender: Optional[str] = None
    age: Optional[int] = None
    major: Optional[str] = None
    class_name: Optional[str] = None
    contact: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class StudentEnvelope(BaseModel):
    student: StudentResponse


class StudentListEnvelope(BaseModel):
    students: List[StudentResponse]
