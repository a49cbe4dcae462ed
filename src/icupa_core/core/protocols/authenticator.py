"""Authenticator protocol contract."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Authenticator(Protocol):
    """Protocol for verifying login credentials."""

    async def authenticate(self, email: str, password: str) -> Optional[str]:
        """Return the user id for valid credentials, None otherwise."""
        ...
