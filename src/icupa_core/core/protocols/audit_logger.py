"""Audit logger protocol contract."""

from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class AuditLogger(Protocol):
    """Protocol for recording domain events on a side channel.

    ``record`` is synchronous and must never raise into the caller.
    Internal failures go to a separate diagnostic channel.
    """

    def record(self, event: str, payload: Dict[str, Any]) -> None:
        """Record a domain event such as ``booking.create``."""
        ...
