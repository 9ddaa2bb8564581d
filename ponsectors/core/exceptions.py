"""
Global exception handling for the application.
Standardizes error responses using Problem Details for HTTP APIs (RFC 7807).
"""

from typing import Any, Dict, Optional

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class EntityNotFoundException(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Entity not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_404_NOT_FOUND, details)


class UserNotFoundException(EntityNotFoundException):
    """No registered account matches the given email."""
    def __init__(self, message: str = "User not found. They must be registered first.", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class BusinessRuleViolationException(AppError):
    """Business logic violation error."""
    def __init__(
        self,
        message: str = "Business rule violation",
        details: Optional[Dict[str, Any]] = None,
        status_code: int = status.HTTP_422_UNPROCESSABLE_ENTITY,
    ):
        super().__init__(message, status_code, details)


class EmailAlreadyRegisteredException(BusinessRuleViolationException):
    def __init__(self, message: str = "This email is already registered.", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details, status.HTTP_409_CONFLICT)


class AlreadyCollaboratorException(BusinessRuleViolationException):
    def __init__(self, message: str = "User is already a collaborator.", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details, status.HTTP_409_CONFLICT)


class InvalidTransitionException(BusinessRuleViolationException):
    """Requested status change is not an edge of the content lifecycle."""
    def __init__(self, message: str = "Invalid status transition", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details, status.HTTP_409_CONFLICT)


class InvalidReplyException(BusinessRuleViolationException):
    """Reply target does not exist or belongs to another thread."""
    def __init__(self, message: str = "Invalid reply target", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ConcurrentUpdateException(AppError):
    """Write lost against a concurrent update of the same entity."""
    def __init__(self, message: str = "Entity was modified concurrently", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_409_CONFLICT, details)


class UnauthorizedException(AppError):
    """Authentication failure error."""
    def __init__(self, message: str = "Unauthorized", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED, details)


class InvalidCredentialsException(UnauthorizedException):
    def __init__(self, message: str = "Invalid email or password.", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ForbiddenException(AppError):
    """Authorization failure error."""
    def __init__(self, message: str = "Forbidden", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_403_FORBIDDEN, details)


class BackendUnavailableException(AppError):
    """Storage backend could not be reached."""
    def __init__(self, message: str = "Storage backend unavailable", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_503_SERVICE_UNAVAILABLE, details)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""

    if isinstance(exc, AppError):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedException) else None
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "code": exc.__class__.__name__,
                    "message": exc.message,
                    "details": exc.details,
                    "path": request.url.path,
                }
            },
            headers=headers,
        )

    logger.exception("Unexpected error occurred", path=request.url.path)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "InternalServerError",
                "message": "An unexpected error occurred. Please try again later.",
                "path": request.url.path,
            }
        },
    )
