"""Search provider protocol contract."""

from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class SearchProvider(Protocol):
    """Protocol for indexing documents into a search backend."""

    name: str

    async def index_document(self, index: str, document: Dict[str, Any]) -> None:
        """Index a document.

        Raises:
            ProviderError: If ``index`` or ``document["id"]`` is missing, or
                the backend fails.
        """
        ...
