"""Base for per-domain use-case modules."""

from typing import Any, Generic, List, Optional, TypeVar

from ...core.entities.base import EntityModel
from ...core.shared.context import UseCaseContext
from .entity_use_cases import EntityUseCases

T = TypeVar("T", bound=EntityModel)


class DomainUseCases(Generic[T]):
    """Wraps the generic use-cases of one entity.

    Subclasses override ``create`` to check their domain rule on the input
    returned by ``parse`` and to attach provider side effects; results of
    the base operations are returned unchanged.
    """

    def __init__(self, base: EntityUseCases[T]):
        self.base = base

    @property
    def entity_name(self) -> str:
        return self.base.entity_name

    def parse(self, data: Any, context: UseCaseContext) -> T:
        """Check the actor, then validate ``data`` against the entity schema.

        Domain rules run on the returned model, so anonymous callers never
        learn about field rules or allow-lists.

        Raises:
            AuthorizationError: If the context has no actor
            ValidationError: If the input does not match the schema
        """
        context.require_actor()
        return self.base.validate(data)

    async def create(self, data: Any, context: UseCaseContext) -> T:
        return await self.base.create(data, context)

    async def get(self, entity_id: str, context: UseCaseContext) -> Optional[T]:
        return await self.base.get(entity_id, context)

    async def list(self, context: UseCaseContext) -> List[T]:
        return await self.base.list(context)
