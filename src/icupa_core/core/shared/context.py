"""Use-case context.

Every use-case call receives the context built by the presentation layer.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from ..exceptions import AuthorizationError
from ...utils.uuid import generate_uuid_v7, utc_now


@dataclass
class UseCaseContext:
    """Per-request metadata threaded through every use-case call.

    ``actor_id`` identifies the caller and keys rate limiting; authorization
    beyond a presence check is enforced downstream by the storage
    collaborator's access policy.
    """

    actor_id: str
    correlation_id: str = ""
    tenant_id: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        if not self.correlation_id:
            self.correlation_id = generate_uuid_v7()

    @property
    def has_actor(self) -> bool:
        """Check if the context carries a non-blank actor."""
        return bool(self.actor_id and str(self.actor_id).strip())

    def require_actor(self) -> str:
        """Return the actor id or raise ``AuthorizationError``."""
        if not self.has_actor:
            raise AuthorizationError(
                "Actor context is required",
                details={"correlation_id": self.correlation_id},
            )
        return self.actor_id


def system_context(correlation_id: str = "") -> UseCaseContext:
    """Context used by internal callers such as health checks."""
    return UseCaseContext(actor_id="system", correlation_id=correlation_id)
