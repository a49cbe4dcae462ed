"""Inventory use-cases."""

from typing import Any

from ....core.exceptions import ValidationError
from ....core.shared.context import UseCaseContext
from ....platform.use_cases import DomainUseCases
from ..entities.inventory_item import InventoryItem


class InventoryUseCases(DomainUseCases[InventoryItem]):

    async def create(self, data: Any, context: UseCaseContext) -> InventoryItem:
        item = self.parse(data, context)
        if item.quantity < 0:
            raise ValidationError.for_field(
                "quantity", "Inventory quantity cannot be negative", self.entity_name
            )
        return await self.base.create(data, context)
