"""Base exceptions for icupa-core.

This module defines the root of the exception hierarchy. Every error raised
by the use-case layer carries a machine readable error code, a human
readable message and a details dictionary so presentation adapters can map
it to a response mechanically.
"""

from typing import Any, Dict, Optional


class IcupaError(Exception):
    """Base exception for all icupa-core errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Structured representation used in error responses and audit records."""
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
            "type": self.__class__.__name__,
        }


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as lookup_status_code
    return lookup_status_code(exception)


def create_error_response(
    exception: IcupaError,
    correlation_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The icupa-core exception
        correlation_id: Request correlation id echoed back to the caller

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "correlation_id": correlation_id,
        }
    }
