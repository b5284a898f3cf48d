"""Exception handlers that turn failures into `{statusCode, message}` bodies."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from eventplanner.api.auth_models import ErrorResponse
from eventplanner.exceptions import SchedulerError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."


def error_response(status_code: int, message: str, headers: dict = None) -> JSONResponse:
    body = ErrorResponse(status_code=status_code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True), headers=headers)


def format_validation_errors(exc: RequestValidationError) -> str:
    """Summarize request validation errors as `field: reason` pairs."""
    parts = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "Invalid request - " + "; ".join(parts) if parts else "Bad Request"


def register_exception_handlers(app: FastAPI) -> None:
    """Register the error boundary on the application."""

    @app.exception_handler(SchedulerError)
    async def scheduler_error_handler(request: Request, exc: SchedulerError):
        """Handle domain errors with their own status and message."""
        if exc.status_code >= 500:
            logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}", exc_info=exc.cause)
        else:
            logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
        return error_response(exc.status_code, exc.message, headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed bodies and query/path params are bad requests."""
        message = format_validation_errors(exc)
        logger.warning(f"Validation error for {request.url.path}: {message}")
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions without leaking their text."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
