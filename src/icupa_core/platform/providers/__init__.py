"""Capability provider implementations."""

from .mock_payment_provider import MockPaymentProvider
from .mock_search_provider import MockSearchProvider
from .mock_messaging_provider import MockMessagingProvider
from .stripe_payment_provider import StripePaymentProvider
from .meilisearch_search_provider import MeilisearchSearchProvider
from .whatsapp_messaging_provider import WhatsAppMessagingProvider
from .factory import Providers, build_providers

__all__ = [
    "MockPaymentProvider",
    "MockSearchProvider",
    "MockMessagingProvider",
    "StripePaymentProvider",
    "MeilisearchSearchProvider",
    "WhatsAppMessagingProvider",
    "Providers",
    "build_providers",
]
