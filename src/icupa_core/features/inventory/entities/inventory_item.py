"""Inventory domain entity."""

from typing import ClassVar

from ....core.entities.base import EntityModel, NonEmptyStr


class InventoryItem(EntityModel):
    """Stock level for one SKU of a listing.

    Quantity sign is enforced by ``InventoryUseCases``.
    """

    entity_name: ClassVar[str] = "inventory_item"
    table_name: ClassVar[str] = "inventory_items"

    tenant_id: NonEmptyStr
    listing_id: NonEmptyStr
    sku: NonEmptyStr
    quantity: int
