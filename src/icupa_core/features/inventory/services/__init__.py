"""Inventory services."""

from .inventory_use_cases import InventoryUseCases

__all__ = ["InventoryUseCases"]
