"""Stored file metadata entity."""

from typing import Annotated, ClassVar, Optional

from pydantic import Field, StringConstraints

from ....core.entities.base import EntityModel, NonEmptyStr

MimeType = Annotated[
    str,
    StringConstraints(strip_whitespace=True, to_lower=True, pattern=r"^[a-z0-9.+-]+/[a-z0-9.+-]+$"),
]


class FileRecord(EntityModel):
    """Metadata of an uploaded file; the bytes live in object storage."""

    entity_name: ClassVar[str] = "file"
    table_name: ClassVar[str] = "files"

    tenant_id: NonEmptyStr
    name: NonEmptyStr
    mime_type: MimeType
    size_bytes: int = Field(ge=0)
    url: Optional[str] = None
