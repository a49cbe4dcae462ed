"""In-memory entity repository."""

from typing import Dict, Generic, List, Optional, Type, TypeVar

from ...core.entities.base import EntityModel
from ...core.exceptions import PersistenceError

T = TypeVar("T", bound=EntityModel)


class InMemoryEntityRepository(Generic[T]):
    """Process-local repository keyed by record id.

    Used for development and tests. Records are immutable models, so stored
    instances are handed out directly.
    """

    def __init__(self, schema: Optional[Type[T]] = None):
        self.schema = schema
        self._items: Dict[str, T] = {}

    @property
    def entity_name(self) -> str:
        return self.schema.entity_name if self.schema else "entity"

    async def create(self, data: T) -> T:
        """Store a record.

        Duplicate ids and duplicate values of the schema's unique fields are
        rejected without side effects.
        """
        if data.id in self._items:
            raise PersistenceError(
                f"{self.entity_name} '{data.id}' already exists",
                entity=self.entity_name,
                details={"entity_id": data.id},
            )

        for field in sorted(type(data).unique_fields):
            value = getattr(data, field)
            if value is not None and await self.find_by_field(field, value) is not None:
                raise PersistenceError(
                    f"{self.entity_name} with this {field} already exists",
                    entity=self.entity_name,
                    details={"field": field},
                )

        self._items[data.id] = data
        return data

    async def find_by_id(self, entity_id: str) -> Optional[T]:
        return self._items.get(entity_id)

    async def list(self) -> List[T]:
        return list(self._items.values())

    async def find_by_field(self, field: str, value: object) -> Optional[T]:
        for item in self._items.values():
            if getattr(item, field, None) == value:
                return item
        return None

    def __len__(self) -> int:
        return len(self._items)
