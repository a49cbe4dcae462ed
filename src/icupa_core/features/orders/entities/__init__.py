"""Orders entities."""

from .order import Order

__all__ = ["Order"]
