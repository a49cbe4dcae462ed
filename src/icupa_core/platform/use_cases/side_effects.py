"""Provider side-effect invocation for domain use-cases."""

import logging
from typing import Any, Awaitable, Callable, Optional

from ...core.entities.base import EntityModel
from ...core.exceptions import ProviderError
from ...core.shared.context import UseCaseContext
from .entity_use_cases import EntityUseCases

logger = logging.getLogger(__name__)


async def invoke_provider(
    call: Callable[[], Awaitable[Any]],
    *,
    use_cases: EntityUseCases,
    record: EntityModel,
    operation: str,
    context: UseCaseContext,
    strict: bool = True,
) -> Optional[Any]:
    """Run a provider call after the core write succeeded.

    Strict calls re-raise ``ProviderError`` so the owning ``create`` fails.
    Best-effort calls log the failure, record
    ``<entity>.side_effect_failed`` and return None.
    """
    try:
        return await call()
    except ProviderError as e:
        if strict:
            logger.error(
                f"{operation} failed for {use_cases.entity_name} {record.id} "
                f"(correlation_id={context.correlation_id}): {e.message}"
            )
            raise

        logger.warning(
            f"{operation} failed for {use_cases.entity_name} {record.id}, continuing: {e.message}"
        )
        use_cases.audit(
            f"{use_cases.entity_name}.side_effect_failed",
            {"id": record.id, "operation": operation, "error": e.to_dict()},
            context,
        )
        return None
