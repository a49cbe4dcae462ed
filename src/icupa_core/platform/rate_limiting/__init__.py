"""Rate limiter implementations."""

from .memory_rate_limiter import InMemoryRateLimiter
from .redis_rate_limiter import RedisRateLimiter
from .factory import build_rate_limiter, create_redis_client

__all__ = ["InMemoryRateLimiter", "RedisRateLimiter", "build_rate_limiter", "create_redis_client"]
