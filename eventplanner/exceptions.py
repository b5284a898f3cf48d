"""Domain error taxonomy for eventplanner.

Every error raised by services, repositories and the auth chain derives from
``SchedulerError`` and carries the HTTP status the API boundary should answer
with. The boundary (``eventplanner.api.errors``) turns these into
``{"statusCode": ..., "message": ...}`` bodies.
"""

from typing import Optional


class SchedulerError(Exception):
    """Base class for all domain errors."""

    status_code: int = 500
    default_message: str = "An unexpected error occurred."

    def __init__(self, message: Optional[str] = None, cause: Optional[BaseException] = None):
        self.message = message or self.default_message
        self.cause = cause
        super().__init__(self.message)


class BadRequestError(SchedulerError):
    """Validation failures and malformed or missing parameters."""

    status_code = 400
    default_message = "Bad Request"


class ConflictError(SchedulerError):
    """Duplicate email or overlapping event."""

    status_code = 409
    default_message = "Conflict"


class EntityNotFoundError(SchedulerError):
    """Missing user or event."""

    status_code = 404
    default_message = "Entity not found"


class InvalidCredentialsError(SchedulerError):
    """Wrong password, or a missing/invalid token."""

    status_code = 401
    default_message = "Invalid credentials"


class MalformedTokenError(SchedulerError):
    """Token verified but its identity claims are structurally broken."""

    status_code = 401
    default_message = "Malformed token"


class ForbiddenError(SchedulerError):
    """Reserved: caller is known but not allowed to touch the resource."""

    status_code = 403
    default_message = "Unauthorized access"


class EntitySaveError(SchedulerError):
    status_code = 500
    default_message = "Failed to save entity"


class EntityUpdateError(SchedulerError):
    status_code = 500
    default_message = "Failed to update entity"


class EntityDeleteError(SchedulerError):
    status_code = 500
    default_message = "Failed to delete entity"


class ConfigurationError(RuntimeError):
    """Raised at startup when required configuration is missing."""
