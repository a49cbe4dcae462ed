"""Messaging provider protocol contract."""

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class MessagingProvider(Protocol):
    """Protocol for delivering messages through a messaging gateway."""

    name: str

    async def send_message(
        self,
        destination: str,
        body: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Send a message.

        Raises:
            ProviderError: If ``destination`` or ``body`` is empty, or the
                gateway fails.
        """
        ...
