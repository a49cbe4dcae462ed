"""Mock messaging provider."""

import logging
from typing import Any, Dict, List, Optional

from .preconditions import check_message

logger = logging.getLogger(__name__)


class MockMessagingProvider:
    """Messaging provider that records messages instead of sending them."""

    name = "mock"

    def __init__(self):
        self.sent: List[Dict[str, Any]] = []

    async def send_message(
        self,
        destination: str,
        body: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        check_message(self.name, destination, body)
        self.sent.append({"destination": destination, "body": body, "metadata": dict(metadata or {})})
        logger.debug(f"Mock message to {destination}")
