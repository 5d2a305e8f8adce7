from fastapi import APIRouter, Depends, Query, status
from typing import Optional
from uuid import UUID

from ..services.student_service import StudentService
from .schemas.admin import TokenData
from .schemas.common import SuccessResponse
from .schemas.student import (
    StudentCreateRequest,
    StudentEnvelope,
    StudentListEnvelope,
    StudentResponse,
    StudentUpdateRequest,
)
from .auth import get_current_admin
from .dependencies import get_student_service

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("", response_model=StudentListEnvelope, summary="List students, newest first")
@router.get("/", response_model=StudentListEnvelope, include_in_schema=False)
async def list_students(
    search: Optional[str] = Query(None, description="Matches student number, name or major"),
    admin: TokenData = Depends(get_current_admin),
    service: StudentService = Depends(get_student_service)
):
    students = await service.list(search)
    return StudentListEnvelope(students=[StudentResponse.model_validate(s) for s in students])


@router.post("", response_model=StudentEnvelope, status_code=status.HTTP_201_CREATED, summary="Create a student")
@router.post("/", response_model=StudentEnvelope, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_student(
    create_request: StudentCreateRequest,
    admin: TokenData = Depends(get_current_admin),
    service: StudentService = Depends(get_student_service)
):
    student = await service.create(create_request.to_record())
    return StudentEnvelope(student=StudentResponse.model_validate(student))


@router.get("/{student_id}", response_model=StudentEnvelope, summary="Get a student")
async def get_student(
    student_id: UUID,
    admin: TokenData = Depends(get_current_admin),
    service: StudentService = Depends(get_student_service)
):
    student = await service.get(student_id)
    return StudentEnvelope(student=StudentResponse.model_validate(student))


@router.put("/{student_id}", response_model=StudentEnvelope, summary="Update some fields of a student")
async def update_student(
    student_id: UUID,
    update_request: StudentUpdateRequest,
    admin: TokenData = Depends(get_current_admin),
    service: StudentService = Depends(get_student_service)
):
    """
    Only the fields present in the body are changed; null or "" clears a field.
    """
    student = await service.update(student_id, update_request.to_patch())
    return StudentEnvelope(student=StudentResponse.model_validate(student))


@router.delete("/{student_id}", response_model=SuccessResponse, summary="Delete a student")
async def delete_student(
    student_id: UUID,
    admin: TokenData = Depends(get_current_admin),
    service: StudentService = Depends(get_student_service)
):
    await service.delete(student_id)
    return SuccessResponse()
