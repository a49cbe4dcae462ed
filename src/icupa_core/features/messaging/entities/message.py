"""Outbound message entity."""

from typing import ClassVar, Optional

from ....core.entities.base import EntityModel, NonEmptyStr


class Message(EntityModel):
    """Message sent to a guest or customer through a messaging channel."""

    entity_name: ClassVar[str] = "message"
    table_name: ClassVar[str] = "messages"

    destination: NonEmptyStr
    body: NonEmptyStr
    channel: str = "whatsapp"
    tenant_id: Optional[str] = None
