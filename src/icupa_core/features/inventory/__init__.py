"""Inventory feature."""

from .entities import InventoryItem
from .services import InventoryUseCases

__all__ = ["InventoryItem", "InventoryUseCases"]
