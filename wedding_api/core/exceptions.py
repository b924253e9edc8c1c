"""
Global exception handling for the application.
Every failure a client can see is one of the AppError kinds below; anything
else becomes a generic 500 and is logged with its traceback.
"""

from typing import Any, Dict, Optional

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""

    code = "AppError"
    default_message = "Application error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class MissingFieldsError(AppError):
    code = "MissingFields"
    default_message = "Missing required fields"
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidRoleError(AppError):
    code = "InvalidRole"
    default_message = "Invalid role"
    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateEmailError(AppError):
    code = "DuplicateEmail"
    default_message = "Email already registered"
    status_code = status.HTTP_409_CONFLICT


class InvalidCredentialsError(AppError):
    """Unknown email and wrong password are deliberately the same error."""

    code = "InvalidCredentials"
    default_message = "Invalid email or password"
    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidTokenError(AppError):
    code = "InvalidToken"
    default_message = "Invalid token"
    status_code = status.HTTP_401_UNAUTHORIZED


class MissingTokenError(InvalidTokenError):
    """No bearer token, or a malformed Authorization header."""


class MissingSubjectError(InvalidTokenError):
    """Token verified but carries neither a sub nor a uid claim."""


class InvalidAssertionError(AppError):
    code = "InvalidAssertion"
    default_message = "Google sign-in failed"
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenException(AppError):
    """Authorization failure error."""

    code = "Forbidden"
    default_message = "Forbidden"
    status_code = status.HTTP_403_FORBIDDEN


class EntityNotFoundException(AppError):
    """Resource not found error."""

    code = "EntityNotFound"
    default_message = "Entity not found"
    status_code = status.HTTP_404_NOT_FOUND


class BusinessRuleViolationException(AppError):
    """Business logic violation error."""

    code = "BusinessRuleViolation"
    default_message = "Business rule violation"
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


def _error_body(exc: AppError) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": exc.message, "code": exc.code}
    if exc.details:
        body["details"] = exc.details
    return body


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc), headers=headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Missing or empty request fields are reported as MissingFields (400)."""
    fields = sorted(
        {
            ".".join(str(part) for part in error.get("loc", ())[1:]) or str(error.get("loc", ("body",))[0])
            for error in exc.errors()
        }
    )
    return JSONResponse(
        status_code=MissingFieldsError.status_code,
        content=_error_body(MissingFieldsError(details={"fields": fields})),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""
    if isinstance(exc, AppError):
        return await app_error_handler(request, exc)

    logger.exception("Unhandled error", method=request.method, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "code": "InternalServerError"},
    )
