"""Authentication session entity."""

from datetime import datetime
from typing import ClassVar, FrozenSet

from pydantic import field_validator

from ....core.entities.base import EntityModel, NonEmptyStr, ensure_utc
from ....utils.uuid import utc_now


class AuthSession(EntityModel):
    """Session issued on a successful login.

    The token is only returned by the login operation itself.
    """

    entity_name: ClassVar[str] = "auth_session"
    table_name: ClassVar[str] = "auth_sessions"
    private_fields: ClassVar[FrozenSet[str]] = frozenset({"token"})

    user_id: NonEmptyStr
    token: NonEmptyStr
    expires_at: datetime

    @field_validator("expires_at")
    @classmethod
    def normalize_timezone(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @property
    def is_expired(self) -> bool:
        return self.expires_at <= utc_now()
