"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from ..config.constants import RateLimitBackend, RepositoryBackend
from ..config.settings import IcupaSettings, get_settings
from ..features.registry import ENTITY_SCHEMAS, ModuleRegistry, build_module_registry
from ..platform.persistence import build_repositories, create_database_pool
from ..platform.rate_limiting import build_rate_limiter, create_redis_client
from .exception_handlers import register_exception_handlers
from .metrics import RequestMetrics
from .middleware import CorrelationIdMiddleware, RequestMetricsMiddleware
from .routers import build_metrics_router, build_routers

logger = logging.getLogger(__name__)


def create_app(
    registry: Optional[ModuleRegistry] = None,
    settings: Optional[IcupaSettings] = None,
) -> FastAPI:
    """Create the HTTP adapter over the module registry.

    Args:
        registry: Pre-built registry; built from settings when omitted.
            With the postgres backend the registry is built at startup,
            once the database pool exists.
        settings: Application settings, defaults to ``get_settings()``

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    deferred = registry is None and settings.repository_backend == RepositoryBackend.POSTGRES

    # Owned by the app when it builds the registry, closed on shutdown
    redis_client = None
    rate_limiter = None
    if registry is None and settings.rate_limit_backend == RateLimitBackend.REDIS:
        redis_client = create_redis_client(settings)
        rate_limiter = build_rate_limiter(settings, redis_client)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        pool = None
        if deferred and app.state.registry is None:
            pool = await create_database_pool(settings)
            app.state.registry = build_module_registry(
                settings,
                repositories=build_repositories(settings, ENTITY_SCHEMAS, pool),
                rate_limiter=rate_limiter,
            )
        logger.info(f"{settings.app_name} {settings.app_version} started ({settings.environment.value})")

        yield

        if pool is not None:
            await pool.close()
            logger.info("Database pool closed")
        if redis_client is not None:
            await redis_client.aclose()
            logger.info("Redis client closed")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    if registry is None and not deferred:
        registry = build_module_registry(settings, rate_limiter=rate_limiter)
    app.state.registry = registry

    # Last added runs first: CORS, correlation id, metrics
    if settings.metrics_enabled:
        app.state.metrics = RequestMetrics()
        app.add_middleware(RequestMetricsMiddleware, metrics=app.state.metrics)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app, is_production=settings.is_production)

    for router in build_routers():
        app.include_router(router)
    if settings.metrics_enabled:
        app.include_router(build_metrics_router())

    return app
