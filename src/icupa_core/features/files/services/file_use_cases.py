"""File metadata use-cases."""

from typing import Any, Iterable

from ....core.exceptions import ValidationError
from ....core.shared.context import UseCaseContext
from ....platform.use_cases import DomainUseCases, EntityUseCases
from ..entities.file_record import FileRecord


class FileUseCases(DomainUseCases[FileRecord]):
    """File registration restricted to allow-listed MIME types.

    Entries ending in ``/`` allow a whole top-level type (``image/``); any
    other entry must match the MIME type exactly.
    """

    def __init__(self, base: EntityUseCases[FileRecord], allowed_mime_prefixes: Iterable[str]):
        super().__init__(base)
        entries = [entry.lower() for entry in allowed_mime_prefixes]
        self.allowed_mime_prefixes = tuple(entry for entry in entries if entry.endswith("/"))
        self.allowed_mime_types = frozenset(entry for entry in entries if not entry.endswith("/"))

    def is_allowed(self, mime_type: str) -> bool:
        mime_type = mime_type.lower()
        return mime_type in self.allowed_mime_types or mime_type.startswith(self.allowed_mime_prefixes)

    async def create(self, data: Any, context: UseCaseContext) -> FileRecord:
        record = self.parse(data, context)
        if not self.is_allowed(record.mime_type):
            raise ValidationError.for_field("mime_type", "Unsupported mime type", self.entity_name)
        return await self.base.create(data, context)
