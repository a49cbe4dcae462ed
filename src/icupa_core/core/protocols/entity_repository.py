"""Entity repository protocol contract."""

from typing import List, Optional, Protocol, TypeVar, runtime_checkable

from ..entities.base import EntityModel

T = TypeVar("T", bound=EntityModel)


@runtime_checkable
class EntityRepository(Protocol[T]):
    """Protocol for entity persistence.

    Defines ONLY the contract the use-case layer consumes. Implementations
    own physical storage and enforce tenant scoping.
    """

    async def create(self, data: T) -> T:
        """Persist an already validated record.

        Args:
            data: Record validated against the entity schema

        Returns:
            The persisted record with system-assigned fields populated

        Raises:
            PersistenceError: If the backing store rejects the write. No
                partial record may remain in that case.
        """
        ...

    async def find_by_id(self, entity_id: str) -> Optional[T]:
        """Find a record by identifier.

        Returns:
            The record, or None when it does not exist. Never raises for
            "not found".
        """
        ...

    async def list(self) -> List[T]:
        """List all records visible to the caller's scope."""
        ...


@runtime_checkable
class FieldLookupRepository(EntityRepository[T], Protocol[T]):
    """Repository that can also look a record up by a unique field."""

    async def find_by_field(self, field: str, value: object) -> Optional[T]:
        """Find the first record whose ``field`` equals ``value``, or None."""
        ...
