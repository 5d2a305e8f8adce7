#app/backend/api/dependencies.py
from fastapi import Depends, Request

from ..db.db_client import AsyncPostgresClient
from ..db.pool import PostgresPool
from ..services.auth_service import AuthService
from ..services.course_service import CourseService
from ..services.student_service import StudentService
from ..services.teacher_service import TeacherService
from ..services.token_service import TokenService


def get_postgres_pool(request: Request) -> PostgresPool:
    """
    Returns the PostgreSQL pool kept in the application state.
    """
    return request.app.state.postgres_pool


def get_db_client(pool: PostgresPool = Depends(get_postgres_pool)) -> AsyncPostgresClient:
    """
    Builds a database client over the shared pool for each request.

    Tests replace this dependency to run the API against an in-memory store.
    """
    return AsyncPostgresClient(pool=pool)


def get_token_service() -> TokenService:
    return TokenService.from_settings()


def get_auth_service(
    db_client: AsyncPostgresClient = Depends(get_db_client),
    token_service: TokenService = Depends(get_token_service)
) -> AuthService:
    return AuthService(db_client=db_client, token_service=token_service)


def get_student_service(db_client: AsyncPostgresClient = Depends(get_db_client)) -> StudentService:
    return StudentService(db_client=db_client)


def get_course_service(db_client: AsyncPostgresClient = Depends(get_db_client)) -> CourseService:
    return CourseService(db_client=db_client)


def get_teacher_service(db_client: AsyncPostgresClient = Depends(get_db_client)) -> TeacherService:
    return TeacherService(db_client=db_client)
