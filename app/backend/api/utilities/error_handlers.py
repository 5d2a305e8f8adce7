# app/backend/api/utilities/error_handlers.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...services.errors import ServiceError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error."

HTTP_MESSAGES = {
    status.HTTP_404_NOT_FOUND: "Not found.",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed.",
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def validation_message(exc: RequestValidationError) -> str:
    """Picks a human readable message from the first schema error."""
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    error = errors[0]
    loc = tuple(error.get("loc", ()))
    error_type = error.get("type")

    if error_type == "json_invalid":
        return "Invalid JSON payload."
    if loc and loc[0] == "path":
        return "Invalid ID format."
    if error_type == "missing" and loc == ("body",):
        return "Request body is required."
    if error_type == "invalid_field":
        return error["msg"]
    field = loc[-1] if loc else "request"
    return f"{field}: {error['msg']}"


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = validation_message(exc)
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = HTTP_MESSAGES.get(exc.status_code, str(exc.detail))
    response = error_response(exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unexpected_error_middleware(request: Request, call_next):
    """
    Turns any exception the handlers did not anticipate into a generic 500.
    The details only go to the log.
    """
    try:
        return await call_next(request)
    except Exception:
        logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=True)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def install_error_handlers(app: FastAPI):
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.middleware("http")(unexpected_error_middleware)
