"""Redis-backed fixed window rate limiter for multi-process deployments."""

import logging
from typing import Any

from redis.exceptions import RedisError

from ...config.constants import DEFAULT_RATE_LIMIT_REQUESTS, DEFAULT_RATE_LIMIT_WINDOW_SECONDS
from ...core.exceptions import PersistenceError, RateLimitExceeded

logger = logging.getLogger(__name__)


class RedisRateLimiter:
    """Fixed window limiter using atomic ``INCR`` on a shared Redis.

    The first increment of a window sets its expiry, so the key disappears
    when the window resets. Increment and expiry run in one transaction.
    """

    def __init__(
        self,
        redis: Any,
        limit: int = DEFAULT_RATE_LIMIT_REQUESTS,
        window_seconds: int = DEFAULT_RATE_LIMIT_WINDOW_SECONDS,
        prefix: str = "rate_limit",
    ):
        """Initialize rate limiter.

        Args:
            redis: ``redis.asyncio.Redis`` client
            limit: Consumptions allowed per key per window
            window_seconds: Window length in seconds
            prefix: Namespace for Redis keys
        """
        if redis is None:
            raise ValueError("Redis client is required")
        if limit <= 0:
            raise ValueError("Limit must be positive")

        self._redis = redis
        self.limit = limit
        self.window_seconds = window_seconds
        self.prefix = prefix

    def _redis_key(self, key: str) -> str:
        return f"{self.prefix}:{key}"

    async def consume(self, key: str) -> None:
        """Consume one unit for ``key`` or raise ``RateLimitExceeded``."""
        redis_key = self._redis_key(key)

        try:
            async with self._redis.pipeline(transaction=True) as pipe:
                pipe.incr(redis_key)
                pipe.expire(redis_key, self.window_seconds, nx=True)
                pipe.ttl(redis_key)
                count, _, ttl = await pipe.execute()
        except RedisError as e:
            logger.error(f"Rate limiter store failed for key={key}: {e}")
            raise PersistenceError(
                "Rate limiter store unavailable",
                details={"key": key, "error": str(e)},
            ) from e

        if int(count) > self.limit:
            retry_after = int(ttl) if ttl and int(ttl) > 0 else self.window_seconds
            logger.warning(f"Rate limit exceeded: key={key}, retry_after={retry_after}s")
            raise RateLimitExceeded(key, retry_after, self.limit)
