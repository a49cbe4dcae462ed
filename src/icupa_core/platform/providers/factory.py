"""Provider resolution from settings.

Provider names are resolved once at startup into concrete instances. An
unknown name, or a known one missing its credentials, fails fast in
production; elsewhere the mock is substituted with a warning.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import httpx

from ...config.settings import IcupaSettings
from ...core.exceptions import ConfigurationError
from ...core.protocols import MessagingProvider, PaymentProvider, SearchProvider
from .meilisearch_search_provider import MeilisearchSearchProvider
from .mock_messaging_provider import MockMessagingProvider
from .mock_payment_provider import MockPaymentProvider
from .mock_search_provider import MockSearchProvider
from .stripe_payment_provider import StripePaymentProvider
from .whatsapp_messaging_provider import WhatsAppMessagingProvider

logger = logging.getLogger(__name__)


@dataclass
class Providers:
    """Concrete capability providers for one process."""
    payment: PaymentProvider
    search: SearchProvider
    messaging: MessagingProvider


def _secret(value: Any) -> Optional[str]:
    return value.get_secret_value() if value is not None else None


def _stripe(settings: IcupaSettings, client: Optional[httpx.AsyncClient]) -> Optional[PaymentProvider]:
    api_key = _secret(settings.stripe_api_key)
    if not api_key:
        return None
    return StripePaymentProvider(
        api_key,
        api_base=settings.stripe_api_base,
        timeout_seconds=settings.provider_timeout_seconds,
        client=client,
    )


def _meilisearch(settings: IcupaSettings, client: Optional[httpx.AsyncClient]) -> Optional[SearchProvider]:
    if not settings.search_url:
        return None
    return MeilisearchSearchProvider(
        settings.search_url,
        api_key=_secret(settings.search_api_key),
        timeout_seconds=settings.provider_timeout_seconds,
        client=client,
    )


def _whatsapp(settings: IcupaSettings, client: Optional[httpx.AsyncClient]) -> Optional[MessagingProvider]:
    access_token = _secret(settings.whatsapp_access_token)
    if not settings.whatsapp_phone_number_id or not access_token:
        return None
    return WhatsAppMessagingProvider(
        settings.whatsapp_phone_number_id,
        access_token,
        api_base=settings.whatsapp_api_base,
        timeout_seconds=settings.provider_timeout_seconds,
        client=client,
    )


ProviderBuilder = Callable[[IcupaSettings, Optional[httpx.AsyncClient]], Optional[Any]]

PAYMENT_PROVIDERS: Dict[str, ProviderBuilder] = {"stripe": _stripe}
SEARCH_PROVIDERS: Dict[str, ProviderBuilder] = {"meilisearch": _meilisearch}
MESSAGING_PROVIDERS: Dict[str, ProviderBuilder] = {"whatsapp": _whatsapp}


def _resolve(
    capability: str,
    name: str,
    builders: Dict[str, ProviderBuilder],
    mock_factory: Callable[[], Any],
    settings: IcupaSettings,
    client: Optional[httpx.AsyncClient],
) -> Any:
    name = (name or "mock").strip().lower()
    if name == "mock":
        if settings.is_production:
            logger.warning(f"Mock {capability} provider configured in production")
        return mock_factory()

    builder = builders.get(name)
    provider = builder(settings, client) if builder else None
    if provider is not None:
        logger.info(f"Using {name} {capability} provider")
        return provider

    reason = "is not configured" if builder else "is unknown"
    if settings.is_production:
        raise ConfigurationError(
            f"{capability.capitalize()} provider '{name}' {reason}",
            details={"capability": capability, "provider": name},
        )

    logger.warning(f"{capability.capitalize()} provider '{name}' {reason}; using mock provider")
    return mock_factory()


def build_providers(
    settings: IcupaSettings,
    client: Optional[httpx.AsyncClient] = None,
) -> Providers:
    """Resolve configured payment, search and messaging providers.

    Raises:
        ConfigurationError: In production, when a named provider is unknown
            or unconfigured
    """
    return Providers(
        payment=_resolve("payment", settings.payment_provider, PAYMENT_PROVIDERS, MockPaymentProvider, settings, client),
        search=_resolve("search", settings.search_provider, SEARCH_PROVIDERS, MockSearchProvider, settings, client),
        messaging=_resolve(
            "messaging", settings.messaging_provider, MESSAGING_PROVIDERS, MockMessagingProvider, settings, client
        ),
    )
