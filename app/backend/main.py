# app/backend/main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware

from .config.config import settings
from .logging.logging_config import setup_logging
from .api import auth, student, course, teacher
from .api.utilities.cors import preflight_middleware
from .api.utilities.error_handlers import install_error_handlers
from .api.utilities.limiter import limiter
from .db.pool import PostgresPool

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Runs when the application starts and stops.

    A missing DATABASE_URL or JWT_SECRET stops the process here, before any
    request is served. The pool itself is opened lazily by the first query.
    """
    setup_logging()
    settings.validate()
    logger.info("Application starting...")

    yield

    logger.info("Application shutting down...")
    await app.state.postgres_pool.close()


app = FastAPI(
    title="Student Admin API",
    description="Administrator API for managing students, courses and teachers",
    version="1.0.0",
    lifespan=lifespan
)

app.state.limiter = limiter
app.state.postgres_pool = PostgresPool.from_settings()

# Innermost first: the error middleware sits under CORS so 500 responses get CORS headers too.
install_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    max_age=86400,
)
app.middleware("http")(preflight_middleware)

app.include_router(auth.router, prefix="/api")
app.include_router(student.router, prefix="/api")
app.include_router(course.router, prefix="/api")
app.include_router(teacher.router, prefix="/api")


@app.get("/health", tags=["System"])
def health_check():
    """Simple endpoint to check that the application is up."""
    return {"status": "ok", "message": "Student Admin API is running."}
