"""Orders feature."""

from .entities import Order
from .services import OrderUseCases

__all__ = ["Order", "OrderUseCases"]
