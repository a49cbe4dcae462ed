"""Search document use-cases."""

from typing import Any

from ....core.protocols import SearchProvider
from ....core.shared.context import UseCaseContext
from ....platform.use_cases import DomainUseCases, EntityUseCases, invoke_provider
from ..entities.search_document import SearchDocument


class SearchUseCases(DomainUseCases[SearchDocument]):
    """Stores a search document and pushes it to its index."""

    def __init__(
        self,
        base: EntityUseCases[SearchDocument],
        search_provider: SearchProvider,
        strict_side_effects: bool = True,
    ):
        super().__init__(base)
        self.search_provider = search_provider
        self.strict_side_effects = strict_side_effects

    async def create(self, data: Any, context: UseCaseContext) -> SearchDocument:
        async def index(document: SearchDocument) -> None:
            await invoke_provider(
                lambda: self.search_provider.index_document(
                    document.index,
                    {
                        "id": document.id,
                        "title": document.title,
                        "body": document.body,
                        "tenant_id": document.tenant_id,
                    },
                ),
                use_cases=self.base,
                record=document,
                operation="index_document",
                context=context,
                strict=self.strict_side_effects,
            )

        return await self.base.create(data, context, after_persist=index)
