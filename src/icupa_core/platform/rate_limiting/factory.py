"""Rate limiter resolution from settings."""

import logging
from typing import Any, Optional

from redis.asyncio import Redis

from ...config.constants import RateLimitBackend
from ...config.settings import IcupaSettings
from ...core.exceptions import ConfigurationError
from ...core.protocols import RateLimiter
from .memory_rate_limiter import InMemoryRateLimiter
from .redis_rate_limiter import RedisRateLimiter

logger = logging.getLogger(__name__)


def create_redis_client(settings: IcupaSettings) -> Redis:
    """Create a Redis client from ``REDIS_URL``.

    Connections open lazily on first use. The caller owns the client and
    closes it with ``aclose()``.

    Raises:
        ConfigurationError: If no URL is configured
    """
    if not settings.redis_url:
        raise ConfigurationError("REDIS_URL is required for the redis rate limiter")
    return Redis.from_url(settings.redis_url)


def build_rate_limiter(settings: IcupaSettings, redis_client: Optional[Any] = None) -> RateLimiter:
    """Create the configured rate limiter.

    Args:
        settings: Application settings
        redis_client: Client for the redis backend, created with
            ``create_redis_client`` when omitted. Callers that close the
            client on shutdown create it themselves and pass it in.

    Raises:
        ConfigurationError: If the redis backend is selected without a URL
            or client
    """
    if settings.rate_limit_backend == RateLimitBackend.REDIS:
        if redis_client is None:
            redis_client = create_redis_client(settings)

        logger.info("Using redis rate limiter")
        return RedisRateLimiter(
            redis_client,
            limit=settings.rate_limit_requests,
            window_seconds=settings.rate_limit_window_seconds,
        )

    return InMemoryRateLimiter(
        limit=settings.rate_limit_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )
