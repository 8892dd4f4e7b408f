"""
Utilities module - Response envelopes and HTTP exceptions.
"""

from common.utils.responses import success_response, error_response
from common.utils.exceptions import (
    APIException,
    UnauthorizedException,
    NotFoundException,
    ValidationException,
    InternalServerException,
    ServiceUnavailableException,
)

__all__ = [
    "success_response",
    "error_response",
    "APIException",
    "UnauthorizedException",
    "NotFoundException",
    "ValidationException",
    "InternalServerException",
    "ServiceUnavailableException",
]
