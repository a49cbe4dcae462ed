"""User domain entity."""

from typing import ClassVar, FrozenSet, Optional

from pydantic import EmailStr, field_validator

from ....core.entities.base import EntityModel, NonEmptyStr


class User(EntityModel):
    """Platform user.

    Emails are stored lowercased and are unique. ``password_hash`` is
    persisted for the authenticator but never exposed.
    """

    entity_name: ClassVar[str] = "user"
    table_name: ClassVar[str] = "users"
    private_fields: ClassVar[FrozenSet[str]] = frozenset({"password_hash"})
    unique_fields: ClassVar[FrozenSet[str]] = frozenset({"email"})

    email: EmailStr
    display_name: NonEmptyStr
    tenant_id: Optional[str] = None
    password_hash: Optional[str] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.lower()
