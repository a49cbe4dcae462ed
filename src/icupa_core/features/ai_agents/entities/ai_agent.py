"""AI agent configuration entity."""

from typing import ClassVar, Optional

from ....core.entities.base import EntityModel, NonEmptyStr


class AiAgent(EntityModel):
    """Tenant-configured assistant backed by a hosted model."""

    entity_name: ClassVar[str] = "ai_agent"
    table_name: ClassVar[str] = "ai_agents"

    tenant_id: NonEmptyStr
    name: NonEmptyStr
    model: NonEmptyStr
    instructions: Optional[str] = None
