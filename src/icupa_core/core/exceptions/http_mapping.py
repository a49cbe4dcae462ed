"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .domain import (
    ValidationError,
    AuthorizationError,
    EntityNotFoundError,
    RateLimitExceeded,
    PersistenceError,
    ProviderError,
    ConfigurationError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationError: 400,

    # 401 Unauthorized
    AuthorizationError: 401,

    # 404 Not Found
    EntityNotFoundError: 404,

    # 429 Too Many Requests
    RateLimitExceeded: 429,

    # 500 Internal Server Error
    ConfigurationError: 500,

    # 502 Bad Gateway
    ProviderError: 502,

    # 503 Service Unavailable
    PersistenceError: 503,
}


def get_http_status_code(exception: Exception) -> int:
    """Resolve the status code for an exception, walking its MRO."""
    for exc_type in type(exception).__mro__:
        if exc_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exc_type]
    return 500
