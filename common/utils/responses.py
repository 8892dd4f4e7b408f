"""
Response envelopes.

Every route answers {"success": true, "data": ...}. The health check
uses the error envelope when the database is down.
"""

from typing import Any, Optional, Dict


def success_response(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    """Wrap a payload in the success envelope. None data is omitted."""
    response: Dict[str, Any] = {"success": True}
    if data is not None:
        response["data"] = data
    if message:
        response["message"] = message
    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Any] = None,
) -> Dict[str, Any]:
    """
    Build the error envelope.

    Args:
        message: Human-readable message
        code: Machine-readable code, e.g. DATABASE_UNAVAILABLE
        details: Extra context

    Returns:
        {"success": False, "error": {"message", "code"?, "details"?}}
    """
    error: Dict[str, Any] = {"message": message}
    if code:
        error["code"] = code
    if details is not None:
        error["details"] = details
    return {"success": False, "error": error}
