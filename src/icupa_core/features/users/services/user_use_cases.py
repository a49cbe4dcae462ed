"""User use-cases."""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from ....core.exceptions import ValidationError
from ....core.shared.context import UseCaseContext
from ....platform.use_cases import DomainUseCases
from ....utils.passwords import hash_password
from ..entities.user import User

logger = logging.getLogger(__name__)


class UserUseCases(DomainUseCases[User]):
    """User creation with password hashing.

    A plain ``password`` in the input is replaced by ``password_hash``
    before persistence, so neither the password nor its hash ever reaches
    the audit log. Hashing runs in the default executor and only after the
    actor and rate limit checks passed.
    """

    async def create(self, data: Any, context: UseCaseContext) -> User:
        payload = dict(data) if isinstance(data, Mapping) else data
        password = payload.pop("password", None) if isinstance(payload, dict) else None

        self.parse(payload, context)
        if isinstance(payload, dict) and "password_hash" in payload:
            raise ValidationError.for_field(
                "password_hash", "password_hash cannot be set directly", self.entity_name
            )

        if password is None:
            return await self.base.create(payload, context)

        if not isinstance(password, str) or len(password) < 8:
            raise ValidationError.for_field(
                "password", "Password must be at least 8 characters", self.entity_name
            )

        async def attach_hash(candidate: User) -> User:
            password_hash = await asyncio.get_running_loop().run_in_executor(
                None, hash_password, password
            )
            return candidate.model_copy(update={"password_hash": password_hash})

        return await self.base.create(payload, context, before_persist=attach_hash)
