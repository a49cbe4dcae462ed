"""Shared HTTP plumbing for real provider adapters."""

import logging
from typing import Any, Dict, Optional

import httpx

from ...core.exceptions import ProviderError

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}: {response.text[:200]}"

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {response.status_code}"


class ProviderHttpClient:
    """POST helper turning transport failures and non-2xx into ``ProviderError``."""

    def __init__(
        self,
        provider: str,
        timeout_seconds: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize HTTP helper.

        Args:
            provider: Provider name used in errors and logs
            timeout_seconds: Request timeout when no client is injected
            client: Shared client; a short-lived one is opened per call otherwise
        """
        self.provider = provider
        self.timeout_seconds = timeout_seconds
        self._client = client

    async def post(
        self,
        url: str,
        operation: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        json: Optional[Any] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        try:
            if self._client is not None:
                response = await self._client.post(url, headers=headers, json=json, data=data)
            else:
                async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                    response = await client.post(url, headers=headers, json=json, data=data)
        except httpx.TimeoutException as e:
            logger.error(f"{self.provider} {operation} timed out: {e}")
            raise ProviderError(
                f"{self.provider} request timed out",
                provider=self.provider,
                operation=operation,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"{self.provider} {operation} failed: {e}")
            raise ProviderError(
                f"{self.provider} is unreachable",
                provider=self.provider,
                operation=operation,
                details={"error": str(e)},
            ) from e

        if response.status_code >= 400:
            message = _error_message(response)
            logger.error(f"{self.provider} {operation} returned {response.status_code}: {message}")
            raise ProviderError(
                f"{self.provider} {operation} failed: {message}",
                provider=self.provider,
                operation=operation,
                details={"status_code": response.status_code},
            )

        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {"data": body}
