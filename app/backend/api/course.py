from fastapi import APIRouter, Depends, Query, status
from typing import Optional
from uuid import UUID

from ..services.course_service import CourseService
from .schemas.admin import TokenData
from .schemas.common import SuccessResponse
from .schemas.course import (
    CourseCreateRequest,
    CourseEnvelope,
    CourseListEnvelope,
    CourseResponse,
    CourseUpdateRequest,
)
from .auth import get_current_admin
from .dependencies import get_course_service

router = APIRouter(prefix="/courses", tags=["Courses"])


@router.get("", response_model=CourseListEnvelope, summary="List courses, newest first")
@router.get("/", response_model=CourseListEnvelope, include_in_schema=False)
async def list_courses(
    search: Optional[str] = Query(None, description="Matches course code or name"),
    admin: TokenData = Depends(get_current_admin),
    service: CourseService = Depends(get_course_service)
):
    courses = await service.list(search)
    return CourseListEnvelope(courses=[CourseResponse.model_validate(c) for c in courses])


@router.post("", response_model=CourseEnvelope, status_code=status.HTTP_201_CREATED, summary="Create a course")
@router.post("/", response_model=CourseEnvelope, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_course(
    create_request: CourseCreateRequest,
    admin: TokenData = Depends(get_current_admin),
    service: CourseService = Depends(get_course_service)
):
    course = await service.create(create_request.to_record())
    return CourseEnvelope(course=CourseResponse.model_validate(course))


@router.get("/{course_id}", response_model=CourseEnvelope, summary="Get a course")
async def get_course(
    course_id: UUID,
    admin: TokenData = Depends(get_current_admin),
    service: CourseService = Depends(get_course_service)
):
    course = await service.get(course_id)
    return CourseEnvelope(course=CourseResponse.model_validate(course))


@router.put("/{course_id}", response_model=CourseEnvelope, summary="Update some fields of a course")
async def update_course(
    course_id: UUID,
    update_request: CourseUpdateRequest,
    admin: TokenData = Depends(get_current_admin),
    service: CourseService = Depends(get_course_service)
):
    """
    Only the fields present in the body are changed; null or "" clears a field.
    """
    course = await service.update(course_id, update_request.to_patch())
    return CourseEnvelope(course=CourseResponse.model_validate(course))


@router.delete("/{course_id}", response_model=SuccessResponse, summary="Delete a course")
async def delete_course(
    course_id: UUID,
    admin: TokenData = Depends(get_current_admin),
    service: CourseService = Depends(get_course_service)
):
    await service.delete(course_id)
    return SuccessResponse()
