from fastapi import APIRouter, Depends, Query, status
from typing import Optional
from uuid import UUID

from ..services.teacher_service import TeacherService
from .schemas.admin import TokenData
from .schemas.common import SuccessResponse
from .schemas.teacher import (
    TeacherCreateRequest,
    TeacherEnvelope,
    TeacherListEnvelope,
    TeacherResponse,
    TeacherUpdateRequest,
)
from .auth import get_current_admin
from .dependencies import get_teacher_service

router = APIRouter(prefix="/teachers", tags=["Teachers"])


@router.get("", response_model=TeacherListEnvelope, summary="List teachers, newest first")
@router.get("/", response_model=TeacherListEnvelope, include_in_schema=False)
async def list_teachers(
    search: Optional[str] = Query(None, description="Matches teacher code, name or department"),
    admin: TokenData = Depends(get_current_admin),
    service: TeacherService = Depends(get_teacher_service)
):
    teachers = await service.list(search)
    return TeacherListEnvelope(teachers=[TeacherResponse.model_validate(t) for t in teachers])


@router.post("", response_model=TeacherEnvelope, status_code=status.HTTP_201_CREATED, summary="Create a teacher")
@router.post("/", response_model=TeacherEnvelope, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_teacher(
    create_request: TeacherCreateRequest,
    admin: TokenData = Depends(get_current_admin),
    service: TeacherService = Depends(get_teacher_service)
):
    teacher = await service.create(create_request.to_record())
    return TeacherEnvelope(teacher=TeacherResponse.model_validate(teacher))


@router.get("/{teacher_id}", response_model=TeacherEnvelope, summary="Get a teacher")
async def get_teacher(
    teacher_id: UUID,
    admin: TokenData = Depends(get_current_admin),
    service: TeacherService = Depends(get_teacher_service)
):
    teacher = await service.get(teacher_id)
    return TeacherEnvelope(teacher=TeacherResponse.model_validate(teacher))


@router.put("/{teacher_id}", response_model=TeacherEnvelope, summary="Update some fields of a teacher")
async def update_teacher(
    teacher_id: UUID,
    update_request: TeacherUpdateRequest,
    admin: TokenData = Depends(get_current_admin),
    service: TeacherService = Depends(get_teacher_service)
):
    """
    Only the fields present in the body are changed; null or "" clears a field.
    """
    teacher = await service.update(teacher_id, update_request.to_patch())
    return TeacherEnvelope(teacher=TeacherResponse.model_validate(teacher))


@router.delete("/{teacher_id}", response_model=SuccessResponse, summary="Delete a teacher")
async def delete_teacher(
    teacher_id: UUID,
    admin: TokenData = Depends(get_current_admin),
    service: TeacherService = Depends(get_teacher_service)
):
    await service.delete(teacher_id)
    return SuccessResponse()
