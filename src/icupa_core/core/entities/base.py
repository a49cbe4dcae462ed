"""Base class for schema-validated entity records."""

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, Dict, FrozenSet

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from ...utils.uuid import generate_uuid_v7, utc_now


Currency = Annotated[
    str,
    StringConstraints(strip_whitespace=True, to_upper=True, pattern=r"^[A-Za-z]{3}$"),
]

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so mixed inputs stay comparable."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class EntityModel(BaseModel):
    """Base for all persisted entities.

    Identifier and timestamps are system-assigned; any value supplied for
    them on create is discarded before validation. Records are immutable
    once built.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        str_strip_whitespace=True,
    )

    entity_name: ClassVar[str] = "entity"
    table_name: ClassVar[str] = "entities"
    system_fields: ClassVar[FrozenSet[str]] = frozenset({"id", "created_at", "updated_at"})
    # Persisted but never exposed through audit records or responses
    private_fields: ClassVar[FrozenSet[str]] = frozenset()
    # Backed by a UNIQUE column; repositories reject a second record with the same value
    unique_fields: ClassVar[FrozenSet[str]] = frozenset()

    id: str = Field(default_factory=generate_uuid_v7)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def strip_system_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Drop caller-supplied identifier and timestamp fields."""
        return {key: value for key, value in data.items() if key not in cls.system_fields}

    @classmethod
    def redact(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Remove private fields from a raw payload."""
        return {key: value for key, value in data.items() if key not in cls.private_fields}

    def to_public(self) -> Dict[str, Any]:
        """JSON-safe dictionary of the record without private fields."""
        return self.model_dump(mode="json", exclude=set(self.private_fields))
