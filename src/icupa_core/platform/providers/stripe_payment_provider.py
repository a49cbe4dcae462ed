"""Stripe payment provider using the PaymentIntents API."""

import logging
from typing import Any, Dict, Optional

import httpx

from .http_client import ProviderHttpClient
from .preconditions import check_charge

logger = logging.getLogger(__name__)


class StripePaymentProvider:
    """Charges through Stripe PaymentIntents.

    Amounts are minor units and the currency is sent lowercased. Metadata
    keys are forwarded as ``metadata[<key>]`` form fields; an ``order_id``
    also becomes the idempotency key.
    """

    name = "stripe"

    def __init__(
        self,
        api_key: str,
        api_base: str = "https://api.stripe.com/v1",
        timeout_seconds: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if not api_key:
            raise ValueError("Stripe API key is required")

        self._api_key = api_key
        self.api_base = api_base.rstrip("/")
        self._http = ProviderHttpClient(self.name, timeout_seconds, client)

    async def charge(
        self,
        amount_cents: int,
        currency: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        check_charge(self.name, amount_cents, currency)
        metadata = metadata or {}

        form: Dict[str, Any] = {
            "amount": str(amount_cents),
            "currency": currency.lower(),
            "automatic_payment_methods[enabled]": "true",
        }
        for key, value in metadata.items():
            form[f"metadata[{key}]"] = str(value)

        headers = {"Authorization": f"Bearer {self._api_key}"}
        if metadata.get("order_id"):
            headers["Idempotency-Key"] = f"order-{metadata['order_id']}"

        body = await self._http.post(
            f"{self.api_base}/payment_intents",
            "charge",
            headers=headers,
            data=form,
        )

        logger.info(f"Stripe payment intent {body.get('id')} status={body.get('status')}")
        return {"id": body.get("id"), "status": body.get("status")}
