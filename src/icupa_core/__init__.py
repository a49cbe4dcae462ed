"""
icupa-core: entity use-case layer for the ICUPA travel and dine-in platform.

Domain modules are wired by ``icupa_core.features.build_module_registry``;
``icupa_core.api.create_app`` exposes them over HTTP.
"""

from .__version__ import __version__
from .core.exceptions import (
    IcupaError,
    ValidationError,
    AuthorizationError,
    RateLimitExceeded,
    PersistenceError,
    ProviderError,
    EntityNotFoundError,
    ConfigurationError,
)
from .core.shared import UseCaseContext

__all__ = [
    "__version__",
    "IcupaError",
    "ValidationError",
    "AuthorizationError",
    "RateLimitExceeded",
    "PersistenceError",
    "ProviderError",
    "EntityNotFoundError",
    "ConfigurationError",
    "UseCaseContext",
]
