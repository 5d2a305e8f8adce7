# app/backend/models/db_models.py

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from uuid import UUID


class Administrator(BaseModel):
    """
    Represents an administrator account, mapping to the 'administrators' table.
    """
    id: UUID
    username: str = Field(..., description="Unique, trimmed login name")
    password_hash: str
    created_at: datetime


class Student(BaseModel):
    """
    Represents a student, mapping to the 'students' table.
    """
    id: UUID
    student_number: str = Field(..., description="Natural key, unique across students")
    name: str
    gender: Optional[str] = None
    age: Optional[int] = None
    major: Optional[str] = None
    class_name: Optional[str] = None
    contact: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class Course(BaseModel):
    """
    Represents a course, mapping to the 'courses' table.
    """
    id: UUID
    course_code: str = Field(..., description="Natural key, unique across courses")
    name: str
    credit_hours: Optional[int] = None
    teacher: Optional[str] = Field(None, description="Free text, not a reference to the teachers table")
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class Teacher(BaseModel):
    """
    Represents a teacher, mapping to the 'teachers' table.
    """
    id: UUID
    teacher_code: str = Field(..., description="Natural key, unique across teachers")
    name: str
    title: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None
    created_at: datetime
    updated_at: datetime
