"""Authentication use-cases."""

import dataclasses
import logging
import secrets
from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Dict

from ....core.exceptions import AuthorizationError, ValidationError
from ....core.protocols import Authenticator
from ....core.shared.context import UseCaseContext
from ....platform.use_cases import DomainUseCases, EntityUseCases
from ....utils.uuid import utc_now
from ..entities.auth_session import AuthSession

logger = logging.getLogger(__name__)


class AuthUseCases(DomainUseCases[AuthSession]):
    """Session issuing on top of the generic session use-cases."""

    def __init__(
        self,
        base: EntityUseCases[AuthSession],
        authenticator: Authenticator,
        session_ttl_seconds: int = 3600,
    ):
        super().__init__(base)
        self.authenticator = authenticator
        self.session_ttl_seconds = session_ttl_seconds

    async def login(self, credentials: Any, context: UseCaseContext) -> Dict[str, Any]:
        """Exchange credentials for a session token.

        Login attempts are budgeted per email rather than per actor, since
        callers are anonymous at this point. The session itself is created
        on behalf of the authenticated user.

        Args:
            credentials: Mapping with ``email`` and ``password``
            context: Caller context, usually anonymous

        Returns:
            ``{"token", "expires_at", "user_id"}``

        Raises:
            ValidationError: If email or password is missing
            RateLimitExceeded: If the email's login budget is exhausted
            AuthorizationError: If the credentials are invalid
        """
        if not isinstance(credentials, Mapping):
            credentials = {}

        email = credentials.get("email")
        password = credentials.get("password")
        issues = [
            {"field": name, "message": f"{name} is required", "type": "missing"}
            for name, value in (("email", email), ("password", password))
            if not isinstance(value, str) or not value.strip()
        ]
        if issues:
            raise ValidationError("Invalid credentials input", issues=issues, entity=self.entity_name)

        email = email.strip().lower()
        await self.base.rate_limiter.consume(f"{email}:{self.entity_name}:login")

        user_id = await self.authenticator.authenticate(email, password)
        if user_id is None:
            self.base.audit(f"{self.entity_name}.login_failed", {"email": email}, context)
            raise AuthorizationError("Invalid credentials")

        session = await self.base.create(
            {
                "user_id": user_id,
                "token": secrets.token_urlsafe(32),
                "expires_at": utc_now() + timedelta(seconds=self.session_ttl_seconds),
            },
            dataclasses.replace(context, actor_id=user_id),
        )
        logger.info(f"User {user_id} logged in (correlation_id={context.correlation_id})")

        return {
            "token": session.token,
            "expires_at": session.expires_at,
            "user_id": session.user_id,
        }
