"""
HTTP exceptions carrying a machine-readable error code.

Services raise these; FastAPI renders them as
{"detail": {"message": ..., "code": ..., "details": ...}}.

Example:
    raise NotFoundException("Mood entry not found", code="MOOD_ENTRY_NOT_FOUND")
"""

from typing import Optional, Any, Dict
from fastapi import HTTPException


class APIException(HTTPException):
    """
    Base API exception.

    Subclasses fix the HTTP status and a fallback code and message.
    """

    status: int = 500
    default_message: str = "Internal server error"
    default_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.message = message or self.default_message
        self.code = code or self.default_code

        detail: Dict[str, Any] = {"message": self.message, "code": self.code}
        if details is not None:
            detail["details"] = details

        super().__init__(status_code=self.status, detail=detail, headers=headers)


class UnauthorizedException(APIException):
    """401 - Missing or invalid bearer token."""
    status = 401
    default_message = "Unauthorized"
    default_code = "UNAUTHORIZED"


class NotFoundException(APIException):
    """404 - Entry or profile missing, or owned by another user."""
    status = 404
    default_message = "Resource not found"
    default_code = "NOT_FOUND"


class ValidationException(APIException):
    """422 - Entry or profile fields failed validation."""
    status = 422
    default_message = "Validation error"
    default_code = "VALIDATION_ERROR"


class InternalServerException(APIException):
    """500 - Unexpected failure, including errors reported by upstream services."""


class ServiceUnavailableException(APIException):
    """503 - An upstream service could not be reached or answered badly."""
    status = 503
    default_message = "Service unavailable"
    default_code = "SERVICE_UNAVAILABLE"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        retry_after: Optional[int] = None,
    ):
        headers = {"Retry-After": str(retry_after)} if retry_after else None
        super().__init__(message, code, headers=headers)
