"""Payments services."""

from .payment_use_cases import PaymentUseCases

__all__ = ["PaymentUseCases"]
