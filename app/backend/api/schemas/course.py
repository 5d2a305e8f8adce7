# app/backend/api/schemas/course.py
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, field_validator, model_validator

from .common import RequestModel, ResponseModel, clean_text, invalid, parse_int, require_text


class CourseCreateRequest(RequestModel):
    course_code: Optional[str] = None
    name: Optional[str] = None
    credit_hours: Optional[int] = None
    teacher: Optional[str] = None
    description: Optional[str] = None

    @field_validator("course_code", "name", "teacher", "description", mode="before")
    @classmethod
    def _trim(cls, value: Any) -> Any:
        return clean_text(value)

    @field_validator("credit_hours", mode="before")
    @classmethod
    def _credit_hours(cls, value: Any) -> Optional[int]:
        return parse_int(value, "Credit hours", 0, 20)

    @model_validator(mode="after")
    def _required(self) -> "CourseCreateRequest":
        if not self.course_code or not self.name:
            raise invalid("Course code and name are required.")
        return self

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump()


class CourseUpdateRequest(RequestModel):
    course_code: Optional[str] = None
    name: Optional[str] = None
    credit_hours: Optional[int] = None
    teacher: Optional[str] = None
    description: Optional[str] = None

    @field_validator("course_code", mode="before")
    @classmethod
    def _course_code(cls, value: Any) -> Any:
        return require_text(value, "Course code cannot be empty.")

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value: Any) -> Any:
        return require_text(value, "Name cannot be empty.")

    @field_validator("teacher", "description", mode="before")
    @classmethod
    def _trim(cls, value: Any) -> Any:
        return clean_text(value)

    @field_validator("credit_hours", mode="before")
    @classmethod
    def _credit_hours(cls, value: Any) -> Optional[int]:
        return parse_int(value, "Credit hours", 0, 20)

    def to_patch(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class CourseResponse(ResponseModel):
    id: UUID
    course_code: str
    name: str
    credit_hours: Optional[int] = None
    teacher: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CourseEnvelope(BaseModel):
    course: CourseResponse


class CourseListEnvelope(BaseModel):
    courses: List[CourseResponse]
