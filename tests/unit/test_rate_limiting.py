"""Tests for rate limiter implementations."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from redis.exceptions import ConnectionError as RedisConnectionError

from icupa_core.config.settings import IcupaSettings
from icupa_core.core.exceptions import ConfigurationError, PersistenceError, RateLimitExceeded
from icupa_core.platform.rate_limiting import (
    InMemoryRateLimiter,
    RedisRateLimiter,
    build_rate_limiter,
    create_redis_client,
)


class TestInMemoryRateLimiter:
    """Test fixed window behaviour with a controlled clock."""

    @pytest.mark.asyncio
    async def test_allows_up_to_limit(self, clock):
        limiter = InMemoryRateLimiter(limit=3, window_seconds=60, clock=clock)

        for _ in range(3):
            await limiter.consume("k")

        assert limiter.remaining("k") == 0

    @pytest.mark.asyncio
    async def test_limit_plus_one_raises_with_retry_after(self, clock):
        limiter = InMemoryRateLimiter(limit=2, window_seconds=60, clock=clock)
        await limiter.consume("k")
        clock.advance(15.5)
        await limiter.consume("k")

        with pytest.raises(RateLimitExceeded) as exc_info:
            await limiter.consume("k")

        assert exc_info.value.retry_after == 45
        assert exc_info.value.limit == 2

    @pytest.mark.asyncio
    async def test_window_resets(self, clock):
        limiter = InMemoryRateLimiter(limit=1, window_seconds=60, clock=clock)
        await limiter.consume("k")
        clock.advance(60)

        await limiter.consume("k")

        assert limiter.remaining("k") == 0

    @pytest.mark.asyncio
    async def test_keys_are_independent(self, clock):
        limiter = InMemoryRateLimiter(limit=1, window_seconds=60, clock=clock)
        await limiter.consume("alice:user:create")

        await limiter.consume("bob:user:create")

        with pytest.raises(RateLimitExceeded):
            await limiter.consume("alice:user:create")

    @pytest.mark.asyncio
    async def test_expired_windows_pruned_at_capacity(self, clock):
        limiter = InMemoryRateLimiter(limit=5, window_seconds=10, clock=clock, max_keys=2)
        await limiter.consume("a")
        await limiter.consume("b")
        clock.advance(11)

        await limiter.consume("c")

        assert set(limiter._windows) == {"c"}

    @pytest.mark.asyncio
    async def test_live_windows_evicted_oldest_first_at_capacity(self, clock):
        limiter = InMemoryRateLimiter(limit=5, window_seconds=60, clock=clock, max_keys=3)
        for key in ("a", "b", "c"):
            await limiter.consume(key)
            clock.advance(1)

        for key in ("d", "e", "f", "g"):
            await limiter.consume(key)

        assert len(limiter._windows) == 3
        assert set(limiter._windows) == {"e", "f", "g"}

    @pytest.mark.asyncio
    async def test_renewed_window_counts_as_newest(self, clock):
        limiter = InMemoryRateLimiter(limit=5, window_seconds=10, clock=clock, max_keys=2)
        await limiter.consume("a")
        clock.advance(5)
        await limiter.consume("b")
        clock.advance(6)
        await limiter.consume("a")

        await limiter.consume("c")

        assert set(limiter._windows) == {"a", "c"}

    @pytest.mark.asyncio
    async def test_reset(self, clock):
        limiter = InMemoryRateLimiter(limit=1, window_seconds=60, clock=clock)
        await limiter.consume("k")

        limiter.reset("k")

        assert limiter.remaining("k") == 1

    def test_invalid_configuration(self):
        with pytest.raises(ValueError):
            InMemoryRateLimiter(limit=0)
        with pytest.raises(ValueError):
            InMemoryRateLimiter(window_seconds=0)
        with pytest.raises(ValueError):
            InMemoryRateLimiter(max_keys=0)


def _redis_with_results(*results):
    """Redis client mock whose pipeline returns ``results`` per execute."""
    pipe = MagicMock()
    pipe.execute = AsyncMock(side_effect=list(results))
    redis = MagicMock()
    redis.pipeline.return_value.__aenter__.return_value = pipe
    return redis, pipe


class TestRedisRateLimiter:
    """Test the Redis limiter against a mocked pipeline."""

    @pytest.mark.asyncio
    async def test_increments_and_sets_expiry(self):
        redis, pipe = _redis_with_results([1, True, 60])
        limiter = RedisRateLimiter(redis, limit=2, window_seconds=60)

        await limiter.consume("actor:user:create")

        pipe.incr.assert_called_once_with("rate_limit:actor:user:create")
        pipe.expire.assert_called_once_with("rate_limit:actor:user:create", 60, nx=True)
        redis.pipeline.assert_called_once_with(transaction=True)

    @pytest.mark.asyncio
    async def test_over_limit_raises_with_ttl(self):
        redis, _ = _redis_with_results([3, False, 42])
        limiter = RedisRateLimiter(redis, limit=2, window_seconds=60)

        with pytest.raises(RateLimitExceeded) as exc_info:
            await limiter.consume("k")

        assert exc_info.value.retry_after == 42

    @pytest.mark.asyncio
    async def test_missing_ttl_falls_back_to_window(self):
        redis, _ = _redis_with_results([3, False, -1])
        limiter = RedisRateLimiter(redis, limit=2, window_seconds=30)

        with pytest.raises(RateLimitExceeded) as exc_info:
            await limiter.consume("k")

        assert exc_info.value.retry_after == 30

    @pytest.mark.asyncio
    async def test_store_failure_is_persistence_error(self):
        redis, pipe = _redis_with_results()
        pipe.execute = AsyncMock(side_effect=RedisConnectionError("refused"))
        limiter = RedisRateLimiter(redis, limit=2, window_seconds=60)

        with pytest.raises(PersistenceError):
            await limiter.consume("k")


class TestBuildRateLimiter:

    def test_memory_backend(self, settings):
        limiter = build_rate_limiter(settings)

        assert isinstance(limiter, InMemoryRateLimiter)
        assert limiter.limit == settings.rate_limit_requests

    def test_redis_backend_with_client(self):
        settings = IcupaSettings(_env_file=None, rate_limit_backend="redis", rate_limit_requests=7)

        limiter = build_rate_limiter(settings, redis_client=MagicMock())

        assert isinstance(limiter, RedisRateLimiter)
        assert limiter.limit == 7

    def test_redis_backend_requires_url(self):
        settings = IcupaSettings(_env_file=None, rate_limit_backend="redis", redis_url=None)

        with pytest.raises(ConfigurationError):
            build_rate_limiter(settings)

    def test_redis_client_from_url(self):
        settings = IcupaSettings(_env_file=None, redis_url="redis://localhost:6379/3")

        client = create_redis_client(settings)

        assert client.connection_pool.connection_kwargs["db"] == 3
