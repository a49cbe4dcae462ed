"""Generic entity use-cases.

``EntityUseCases`` turns an entity schema plus its collaborators into the
standard create/get/list operations. Validation, rate limiting and auditing
are applied uniformly here so domain modules only add their own rules and
provider side effects.
"""

import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import ValidationError as SchemaValidationError

from ...core.entities.base import EntityModel
from ...core.exceptions import IcupaError, ValidationError
from ...core.protocols import AuditLogger, EntityRepository, RateLimiter
from ...core.shared.context import UseCaseContext

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=EntityModel)

BeforePersistHook = Callable[[Any], Awaitable[Any]]
AfterPersistHook = Callable[[Any], Awaitable[None]]


def schema_issues(error: SchemaValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into field-level issues."""
    return [
        {
            "field": ".".join(str(part) for part in issue["loc"]) or "__root__",
            "message": issue["msg"],
            "type": issue["type"],
        }
        for issue in error.errors()
    ]


class EntityUseCases(Generic[T]):
    """Standard create/get/list operations for one entity type.

    ``create`` runs strictly in order: actor check, rate limit, schema
    validation, optional before-persist transform, repository write,
    optional after-persist hook (provider side effect), audit record. Reads only check the actor and delegate to the
    repository.
    """

    def __init__(
        self,
        schema: Type[T],
        repository: EntityRepository[T],
        audit_logger: AuditLogger,
        rate_limiter: RateLimiter,
        entity_name: Optional[str] = None,
    ):
        """Initialize with injected dependencies.

        Args:
            schema: Entity model used to validate input
            repository: Repository for the entity's backing store
            audit_logger: Side-channel event recorder
            rate_limiter: Per-key budget enforcement for mutations
            entity_name: Name used in rate-limit keys and audit events,
                defaults to ``schema.entity_name``
        """
        self.schema = schema
        self.repository = repository
        self.audit_logger = audit_logger
        self.rate_limiter = rate_limiter
        self.entity_name = entity_name or schema.entity_name

    def rate_limit_key(self, context: UseCaseContext, operation: str = "create") -> str:
        """Key consumed from the rate limiter for ``operation``."""
        return f"{context.actor_id}:{self.entity_name}:{operation}"

    def validate(self, data: Any) -> T:
        """Validate raw input against the entity schema.

        Raises:
            ValidationError: With field-level issues on mismatch
        """
        if not isinstance(data, Mapping):
            raise ValidationError(
                f"Invalid {self.entity_name} input",
                issues=[{"field": "__root__", "message": "Input must be an object", "type": "dict_type"}],
                entity=self.entity_name,
            )

        try:
            return self.schema.model_validate(self.schema.strip_system_fields(dict(data)))
        except SchemaValidationError as e:
            raise ValidationError(
                f"Invalid {self.entity_name} input",
                issues=schema_issues(e),
                entity=self.entity_name,
            ) from e

    async def create(
        self,
        data: Any,
        context: UseCaseContext,
        *,
        before_persist: Optional[BeforePersistHook] = None,
        after_persist: Optional[AfterPersistHook] = None,
    ) -> T:
        """Create a record.

        Args:
            data: Raw input
            context: Caller context
            before_persist: Awaited with the validated candidate once the
                actor and rate limit checks passed; returns the record to
                persist. Expensive derivations belong here.
            after_persist: Awaited with the persisted record before the
                audit entry is written; its errors propagate

        Returns:
            The persisted record

        Raises:
            AuthorizationError: If the context has no actor
            RateLimitExceeded: If the actor's create budget is exhausted
            ValidationError: If the input does not match the schema
            PersistenceError: If the repository write fails
        """
        context.require_actor()
        await self.rate_limiter.consume(self.rate_limit_key(context))

        candidate = self.validate(data)
        if before_persist is not None:
            candidate = await before_persist(candidate)

        try:
            record = await self.repository.create(candidate)
        except IcupaError as e:
            logger.error(
                f"Failed to create {self.entity_name} "
                f"(correlation_id={context.correlation_id}): {e.message}"
            )
            raise

        if after_persist is not None:
            await after_persist(record)

        self.audit(
            f"{self.entity_name}.create",
            {**self.schema.redact(dict(data)), "result": record.to_public()},
            context,
        )
        logger.info(f"Created {self.entity_name} {record.id} (correlation_id={context.correlation_id})")
        return record

    async def get(self, entity_id: str, context: UseCaseContext) -> Optional[T]:
        """Get a record by identifier, or None."""
        context.require_actor()
        return await self.repository.find_by_id(entity_id)

    async def list(self, context: UseCaseContext) -> List[T]:
        """List records visible to the caller."""
        context.require_actor()
        return await self.repository.list()

    def audit(self, event: str, payload: Dict[str, Any], context: Optional[UseCaseContext] = None) -> None:
        """Record an audit event without ever raising into the caller."""
        if context is not None:
            payload = {
                **payload,
                "context": {"actor_id": context.actor_id, "correlation_id": context.correlation_id},
            }
        try:
            self.audit_logger.record(event, payload)
        except Exception as e:
            logger.warning(f"Audit logger failed to record '{event}': {e}")


def create_use_cases(
    schema: Type[T],
    repository: EntityRepository[T],
    audit_logger: AuditLogger,
    rate_limiter: RateLimiter,
    entity_name: Optional[str] = None,
) -> EntityUseCases[T]:
    """Build the standard use-cases for an entity schema."""
    return EntityUseCases(schema, repository, audit_logger, rate_limiter, entity_name)
