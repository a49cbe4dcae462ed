"""
Exception handlers mapping the error taxonomy to HTTP responses.

Every error body has the shape
``{"error": {"message", "correlation_id", "code", "details"}}``.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.exceptions import IcupaError, RateLimitExceeded, create_error_response, get_http_status_code

logger = logging.getLogger(__name__)


def _correlation_id(request: Request) -> Optional[str]:
    return getattr(request.state, "correlation_id", None)


def _error_body(
    message: str,
    code: str,
    correlation_id: Optional[str],
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    return {
        "error": {
            "message": message,
            "correlation_id": correlation_id,
            "code": code,
            "details": details or {},
        }
    }


def register_exception_handlers(app: FastAPI, is_production: bool = True) -> None:
    """Register exception handlers for the application.

    Args:
        app: FastAPI application instance
        is_production: Hide unexpected error messages from callers
    """

    @app.exception_handler(IcupaError)
    async def icupa_exception_handler(request: Request, exc: IcupaError):
        """Handle use-case errors."""
        status_code = get_http_status_code(exc)
        if status_code >= 500:
            logger.error(f"{exc.error_code} on {request.url.path}: {exc.message}")
        else:
            logger.info(f"{exc.error_code} on {request.url.path}: {exc.message}")

        headers = None
        if isinstance(exc, RateLimitExceeded):
            headers = {"Retry-After": str(exc.retry_after)}

        return JSONResponse(
            status_code=status_code,
            content=create_error_response(exc, _correlation_id(request)),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Handle malformed requests rejected before reaching a use-case."""
        issues = [
            {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"], "type": error["type"]}
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("Invalid request", "ValidationError", _correlation_id(request), {"issues": issues}),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)

        message = "An unexpected error occurred" if is_production else str(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(message, "InternalError", _correlation_id(request)),
        )
