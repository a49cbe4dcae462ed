"""Authenticator backed by the user repository."""

import asyncio
import logging
from typing import Optional

from ....core.protocols import FieldLookupRepository
from ....utils.passwords import verify_password

logger = logging.getLogger(__name__)


class RepositoryAuthenticator:
    """Verifies email and password against stored user hashes."""

    def __init__(self, user_repository: FieldLookupRepository):
        self.user_repository = user_repository

    async def authenticate(self, email: str, password: str) -> Optional[str]:
        """Return the user id for valid credentials, None otherwise."""
        user = await self.user_repository.find_by_field("email", email.strip().lower())
        if user is None or not user.password_hash:
            logger.debug("Login rejected: unknown user or no password set")
            return None

        matches = await asyncio.get_running_loop().run_in_executor(
            None, verify_password, password, user.password_hash
        )
        if not matches:
            logger.debug(f"Login rejected for user {user.id}: password mismatch")
            return None

        return user.id
