"""Listing use-cases."""

from typing import Any

from ....config.constants import LISTINGS_SEARCH_INDEX
from ....core.protocols import SearchProvider
from ....core.shared.context import UseCaseContext
from ....platform.use_cases import DomainUseCases, EntityUseCases, invoke_provider
from ..entities.listing import Listing


class ListingUseCases(DomainUseCases[Listing]):
    """Listing creation followed by search indexing."""

    def __init__(
        self,
        base: EntityUseCases[Listing],
        search_provider: SearchProvider,
        strict_side_effects: bool = True,
    ):
        super().__init__(base)
        self.search_provider = search_provider
        self.strict_side_effects = strict_side_effects

    @staticmethod
    def search_document(listing: Listing) -> dict:
        """Document indexed for a listing, copied from the stored record."""
        return {
            "id": listing.id,
            "title": listing.title,
            "description": listing.description,
            "tenant_id": listing.tenant_id,
        }

    async def create(self, data: Any, context: UseCaseContext) -> Listing:
        async def index(listing: Listing) -> None:
            await invoke_provider(
                lambda: self.search_provider.index_document(LISTINGS_SEARCH_INDEX, self.search_document(listing)),
                use_cases=self.base,
                record=listing,
                operation="index_document",
                context=context,
                strict=self.strict_side_effects,
            )

        return await self.base.create(data, context, after_persist=index)
