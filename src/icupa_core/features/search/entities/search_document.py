"""Search document entity."""

from typing import ClassVar, Optional

from ....core.entities.base import EntityModel, NonEmptyStr


class SearchDocument(EntityModel):
    entity_name: ClassVar[str] = "search_document"
    table_name: ClassVar[str] = "search_documents"

    index: NonEmptyStr
    title: NonEmptyStr
    body: str = ""
    tenant_id: Optional[str] = None
