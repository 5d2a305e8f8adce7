# app/backend/api/schemas/teacher.py
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, field_validator, model_validator

from .common import RequestModel, ResponseModel, check_email, check_phone, clean_text, invalid, require_text


class TeacherCreateRequest(RequestModel):
    teacher_code: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None

    @field_validator("teacher_code", "name", "title", "department", mode="before")
    @classmethod
    def _trim(cls, value: Any) -> Any:
        return clean_text(value)

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, value: Any) -> Any:
        return check_email(value)

    @field_validator("phone", mode="before")
    @classmethod
    def _phone(cls, value: Any) -> Any:
        return check_phone(value)

    @model_validator(mode="after")
    def _required(self) -> "TeacherCreateRequest":
        if not self.teacher_code or not self.name:
            raise invalid("Teacher code and name are required.")
        return self

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump()


class TeacherUpdateRequest(RequestModel):
    teacher_code: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None

    @field_validator("teacher_code", mode="before")
    @classmethod
    def _teacher_code(cls, value: Any) -> Any:
        return require_text(value, "Teacher code cannot be empty.")

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value: Any) -> Any:
        return require_text(value, "Name cannot be empty.")

    @field_validator("title", "department", mode="before")
    @classmethod
    def _trim(cls, value: Any) -> Any:
        return clean_text(value)

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, value: Any) -> Any:
        return check_email(value)

    @field_validator("phone", mode="before")
    @classmethod
    def _phone(cls, value: Any) -> Any:
        return check_phone(value)

    def to_patch(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class TeacherResponse(ResponseModel):
    id: UUID
    teacher_code: str
    name: str
    title: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class TeacherEnvelope(BaseModel):
    teacher: TeacherResponse


class TeacherListEnvelope(BaseModel):
    teachers: List[TeacherResponse]
