"""Mock search provider."""

from typing import Any, Dict, List

from .preconditions import check_document


class MockSearchProvider:
    """Search provider keeping indexed documents in memory."""

    name = "mock"

    def __init__(self):
        self.indexes: Dict[str, Dict[str, Dict[str, Any]]] = {}

    async def index_document(self, index: str, document: Dict[str, Any]) -> None:
        check_document(self.name, index, document)
        self.indexes.setdefault(index, {})[str(document["id"])] = dict(document)

    def documents(self, index: str) -> List[Dict[str, Any]]:
        return list(self.indexes.get(index, {}).values())
