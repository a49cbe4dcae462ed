"""Inventory entities."""

from .inventory_item import InventoryItem

__all__ = ["InventoryItem"]
