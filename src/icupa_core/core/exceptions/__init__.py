"""Exceptions module for icupa-core."""

from .base import (
    IcupaError,
    get_http_status_code,
    create_error_response,
)
from .domain import (
    ValidationError,
    AuthorizationError,
    RateLimitExceeded,
    PersistenceError,
    ProviderError,
    EntityNotFoundError,
    ConfigurationError,
)

__all__ = [
    "IcupaError",
    "get_http_status_code",
    "create_error_response",
    "ValidationError",
    "AuthorizationError",
    "RateLimitExceeded",
    "PersistenceError",
    "ProviderError",
    "EntityNotFoundError",
    "ConfigurationError",
]
