"""Notification entity."""

from typing import ClassVar

from ....core.entities.base import EntityModel, NonEmptyStr


class Notification(EntityModel):
    """In-app notification for one user."""

    entity_name: ClassVar[str] = "notification"
    table_name: ClassVar[str] = "notifications"

    user_id: NonEmptyStr
    title: NonEmptyStr
    body: str = ""
    read: bool = False
