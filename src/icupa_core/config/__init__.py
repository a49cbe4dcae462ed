"""Configuration for icupa-core."""

from .settings import IcupaSettings, get_settings
from .constants import (
    Environment,
    RepositoryBackend,
    RateLimitBackend,
    SideEffectPolicy,
    OrderStatus,
    BookingStatus,
    PaymentStatus,
)
from .logging_config import configure_logging

__all__ = [
    "IcupaSettings",
    "get_settings",
    "configure_logging",
    "Environment",
    "RepositoryBackend",
    "RateLimitBackend",
    "SideEffectPolicy",
    "OrderStatus",
    "BookingStatus",
    "PaymentStatus",
]
