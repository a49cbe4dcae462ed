"""HTTP routes for the domain modules."""

import logging
from dataclasses import fields
from typing import Any, List

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response

from ..core.exceptions import EntityNotFoundError, ValidationError
from ..core.shared.context import UseCaseContext, system_context
from ..features.registry import ModuleRegistry
from .dependencies import get_anonymous_context, get_context, get_registry

logger = logging.getLogger(__name__)

# Sessions are only issued through the login route
READ_ONLY_MODULES = frozenset({"auth"})


async def read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError as e:
        raise ValidationError(
            "Malformed JSON body",
            issues=[{"field": "__root__", "message": str(e), "type": "json_invalid"}],
        ) from e


def build_module_router(attribute: str) -> APIRouter:
    """Create list, get and create routes for one registry module.

    Args:
        attribute: ``ModuleRegistry`` attribute name; the URL uses its
            hyphenated form
    """
    route_name = attribute.replace("_", "-")
    router = APIRouter(prefix=f"/v1/{route_name}", tags=[route_name])

    @router.get("", name=f"list_{attribute}")
    async def list_records(
        registry: ModuleRegistry = Depends(get_registry),
        context: UseCaseContext = Depends(get_context),
    ):
        records = await getattr(registry, attribute).list(context)
        return {"data": [record.to_public() for record in records]}

    @router.get("/{entity_id}", name=f"get_{attribute}")
    async def get_record(
        entity_id: str,
        registry: ModuleRegistry = Depends(get_registry),
        context: UseCaseContext = Depends(get_context),
    ):
        use_cases = getattr(registry, attribute)
        record = await use_cases.get(entity_id, context)
        if record is None:
            raise EntityNotFoundError(use_cases.entity_name, entity_id)
        return {"data": record.to_public()}

    if attribute not in READ_ONLY_MODULES:
        @router.post("", status_code=status.HTTP_201_CREATED, name=f"create_{attribute}")
        async def create_record(
            request: Request,
            registry: ModuleRegistry = Depends(get_registry),
            context: UseCaseContext = Depends(get_context),
        ):
            data = await read_json_body(request)
            record = await getattr(registry, attribute).create(data, context)
            return {"data": record.to_public()}

    return router


def build_auth_router() -> APIRouter:
    router = APIRouter(prefix="/v1/auth", tags=["auth"])

    @router.post("/login")
    async def login(
        request: Request,
        registry: ModuleRegistry = Depends(get_registry),
        context: UseCaseContext = Depends(get_anonymous_context),
    ):
        credentials = await read_json_body(request)
        return {"data": await registry.auth.login(credentials, context)}

    return router


def build_health_router() -> APIRouter:
    router = APIRouter(prefix="/health", tags=["health"])

    @router.get("/live")
    async def live():
        return {"status": "ok"}

    @router.get("/ready")
    async def ready(request: Request):
        registry = getattr(request.app.state, "registry", None)
        if registry is None:
            return JSONResponse(status_code=503, content={"status": "degraded", "reason": "not initialized"})

        try:
            await registry.users.list(system_context(getattr(request.state, "correlation_id", "")))
        except Exception as e:
            logger.warning(f"Readiness check failed: {e}")
            return JSONResponse(status_code=503, content={"status": "degraded"})
        return {"status": "ready"}

    return router


def build_metrics_router() -> APIRouter:
    router = APIRouter(tags=["monitoring"])

    @router.get("/metrics", include_in_schema=False)
    async def metrics(request: Request) -> Response:
        request_metrics = request.app.state.metrics
        return Response(content=request_metrics.render(), media_type=request_metrics.content_type)

    return router


def build_routers() -> List[APIRouter]:
    """All routers of the API, login before the generic module routes."""
    routers = [build_health_router(), build_auth_router()]
    routers.extend(build_module_router(item.name) for item in fields(ModuleRegistry))
    return routers
