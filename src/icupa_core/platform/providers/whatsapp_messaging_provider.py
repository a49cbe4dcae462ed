"""WhatsApp Cloud API messaging provider."""

import logging
from typing import Any, Dict, Optional

import httpx

from .http_client import ProviderHttpClient
from .preconditions import check_message

logger = logging.getLogger(__name__)


class WhatsAppMessagingProvider:
    """Sends text messages through the WhatsApp Cloud API."""

    name = "whatsapp"

    def __init__(
        self,
        phone_number_id: str,
        access_token: str,
        api_base: str = "https://graph.facebook.com/v19.0",
        timeout_seconds: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if not phone_number_id or not access_token:
            raise ValueError("WhatsApp phone number id and access token are required")

        self.phone_number_id = phone_number_id
        self._access_token = access_token
        self.api_base = api_base.rstrip("/")
        self._http = ProviderHttpClient(self.name, timeout_seconds, client)

    async def send_message(
        self,
        destination: str,
        body: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        check_message(self.name, destination, body)

        payload = {
            "messaging_product": "whatsapp",
            "to": destination,
            "type": "text",
            "text": {"body": body},
        }
        if metadata:
            # Echoed back in delivery webhooks
            payload["biz_opaque_callback_data"] = ",".join(f"{k}={v}" for k, v in sorted(metadata.items()))

        response = await self._http.post(
            f"{self.api_base}/{self.phone_number_id}/messages",
            "send_message",
            headers={"Authorization": f"Bearer {self._access_token}"},
            json=payload,
        )
        logger.debug(f"WhatsApp message accepted: {response.get('messages')}")
