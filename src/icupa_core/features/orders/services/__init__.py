"""Orders services."""

from .order_use_cases import OrderUseCases

__all__ = ["OrderUseCases"]
