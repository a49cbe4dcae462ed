"""FastAPI dependencies for the use-case adapter."""

from fastapi import Request

from ..core.exceptions import ConfigurationError
from ..core.shared.context import UseCaseContext
from ..features.registry import ModuleRegistry

ACTOR_HEADER = "x-actor-id"
TENANT_HEADER = "x-tenant-id"
ANONYMOUS_ACTOR = "anonymous"


def get_registry(request: Request) -> ModuleRegistry:
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        raise ConfigurationError("Module registry is not initialized")
    return registry


def get_context(request: Request) -> UseCaseContext:
    """Use-case context for an authenticated route.

    A missing actor header yields an empty actor, which the use-cases
    reject with ``AuthorizationError``.
    """
    return UseCaseContext(
        actor_id=(request.headers.get(ACTOR_HEADER) or "").strip(),
        correlation_id=getattr(request.state, "correlation_id", ""),
        tenant_id=request.headers.get(TENANT_HEADER),
    )


def get_anonymous_context(request: Request) -> UseCaseContext:
    """Use-case context for routes callable before login."""
    return UseCaseContext(
        actor_id=ANONYMOUS_ACTOR,
        correlation_id=getattr(request.state, "correlation_id", ""),
        tenant_id=request.headers.get(TENANT_HEADER),
    )
