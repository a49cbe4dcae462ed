"""Use-case error taxonomy.

Errors propagate unchanged from the layer that raised them to the
presentation boundary. Only the audit logger swallows (its own) failures.
"""

from typing import Any, Dict, List, Optional

from .base import IcupaError


class ValidationError(IcupaError):
    """Input failed schema or domain rule validation.

    ``issues`` holds field-level problems as ``{"field", "message", "type"}``.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        *,
        issues: Optional[List[Dict[str, Any]]] = None,
        entity: Optional[str] = None,
    ):
        self.issues = issues or []
        self.entity = entity
        super().__init__(
            message,
            details={"entity": entity, "issues": self.issues},
        )

    @classmethod
    def for_field(cls, field: str, message: str, entity: Optional[str] = None) -> "ValidationError":
        """Create a validation error for a single domain rule on one field."""
        return cls(
            message,
            issues=[{"field": field, "message": message, "type": "domain_rule"}],
            entity=entity,
        )


class AuthorizationError(IcupaError):
    """Missing or invalid actor context."""
    pass


class RateLimitExceeded(IcupaError):
    """Caller exceeded its request budget for the current window."""

    def __init__(self, key: str, retry_after: int, limit: Optional[int] = None):
        self.key = key
        self.retry_after = retry_after
        self.limit = limit
        super().__init__(
            f"Rate limit exceeded. Retry in {retry_after} seconds",
            details={"key": key, "retry_after": retry_after, "limit": limit},
        )


class PersistenceError(IcupaError):
    """Backing store rejected or failed an operation."""

    def __init__(self, message: str, *, entity: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.entity = entity
        super().__init__(message, details={"entity": entity, **(details or {})})


class ProviderError(IcupaError):
    """A payment, search or messaging provider failed or is unconfigured."""

    def __init__(
        self,
        message: str,
        *,
        provider: Optional[str] = None,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.provider = provider
        self.operation = operation
        super().__init__(
            message,
            details={"provider": provider, "operation": operation, **(details or {})},
        )


class EntityNotFoundError(IcupaError):
    """Raised by presentation adapters when a lookup yields nothing."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            f"{entity} '{entity_id}' not found",
            details={"entity": entity, "entity_id": entity_id},
        )


class ConfigurationError(IcupaError):
    """Raised at startup when settings cannot be resolved into collaborators."""
    pass
