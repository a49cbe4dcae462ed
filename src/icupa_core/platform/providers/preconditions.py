"""Port preconditions shared by mock and real providers."""

from typing import Any, Dict

from ...core.exceptions import ProviderError


def check_charge(provider: str, amount_cents: int, currency: str) -> None:
    if not isinstance(amount_cents, int) or amount_cents <= 0:
        raise ProviderError(
            "Charge amount must be a positive integer of minor units",
            provider=provider,
            operation="charge",
            details={"amount_cents": amount_cents},
        )
    if not currency or len(currency) != 3:
        raise ProviderError(
            "Charge currency must be a 3-letter code",
            provider=provider,
            operation="charge",
            details={"currency": currency},
        )


def check_document(provider: str, index: str, document: Dict[str, Any]) -> None:
    if not index:
        raise ProviderError("Search index is required", provider=provider, operation="index_document")
    if not isinstance(document, dict) or not document.get("id"):
        raise ProviderError("Search document id is required", provider=provider, operation="index_document")


def check_message(provider: str, destination: str, body: str) -> None:
    if not destination or not str(destination).strip():
        raise ProviderError("Message destination is required", provider=provider, operation="send_message")
    if not body or not str(body).strip():
        raise ProviderError("Message body is required", provider=provider, operation="send_message")
