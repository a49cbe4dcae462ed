"""Payments feature."""

from .entities import Payment
from .services import PaymentUseCases

__all__ = ["Payment", "PaymentUseCases"]
