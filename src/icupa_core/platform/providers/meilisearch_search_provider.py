"""Meilisearch search provider."""

from typing import Any, Dict, Optional

import httpx

from .http_client import ProviderHttpClient
from .preconditions import check_document


class MeilisearchSearchProvider:
    """Adds or replaces documents through ``POST /indexes/{index}/documents``."""

    name = "meilisearch"

    def __init__(
        self,
        url: str,
        api_key: Optional[str] = None,
        timeout_seconds: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if not url:
            raise ValueError("Search URL is required")

        self.url = url.rstrip("/")
        self._api_key = api_key
        self._http = ProviderHttpClient(self.name, timeout_seconds, client)

    async def index_document(self, index: str, document: Dict[str, Any]) -> None:
        check_document(self.name, index, document)

        headers = {"Authorization": f"Bearer {self._api_key}"} if self._api_key else {}
        await self._http.post(
            f"{self.url}/indexes/{index}/documents",
            "index_document",
            headers=headers,
            json=[document],
        )
