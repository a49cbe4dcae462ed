"""In-memory fixed window rate limiter."""

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from ...config.constants import DEFAULT_RATE_LIMIT_REQUESTS, DEFAULT_RATE_LIMIT_WINDOW_SECONDS
from ...core.exceptions import RateLimitExceeded

logger = logging.getLogger(__name__)


@dataclass
class WindowState:
    """Consumption count of one key in its current window."""
    window_start: float
    count: int = 0


class InMemoryRateLimiter:
    """Process-local fixed window rate limiter.

    Counters are shared mutable state of the process. ``consume`` never
    suspends between reading and updating a window, so the single event
    loop serializes all mutations. Multi-process deployments need
    ``RedisRateLimiter`` instead.

    At most ``max_keys`` windows are tracked. Expired windows are pruned
    first; if the map is still full, the oldest windows are evicted and
    their keys start a fresh window on the next call.
    """

    def __init__(
        self,
        limit: int = DEFAULT_RATE_LIMIT_REQUESTS,
        window_seconds: int = DEFAULT_RATE_LIMIT_WINDOW_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        max_keys: int = 10000,
    ):
        """Initialize rate limiter.

        Args:
            limit: Consumptions allowed per key per window
            window_seconds: Window length in seconds
            clock: Monotonic time source
            max_keys: Upper bound on tracked windows
        """
        if limit <= 0:
            raise ValueError("Limit must be positive")
        if window_seconds <= 0:
            raise ValueError("Window must be positive")
        if max_keys <= 0:
            raise ValueError("max_keys must be positive")

        self.limit = limit
        self.window_seconds = window_seconds
        self.max_keys = max_keys
        self._clock = clock
        self._windows: Dict[str, WindowState] = {}

    async def consume(self, key: str) -> None:
        """Consume one unit for ``key`` or raise ``RateLimitExceeded``."""
        now = self._clock()
        state = self._windows.get(key)

        if state is None or now - state.window_start >= self.window_seconds:
            # Reinserted so dict order stays oldest window first
            self._windows.pop(key, None)
            if len(self._windows) >= self.max_keys:
                self._prune(now)
            state = WindowState(window_start=now)
            self._windows[key] = state

        if state.count >= self.limit:
            retry_after = max(1, math.ceil(state.window_start + self.window_seconds - now))
            logger.warning(f"Rate limit exceeded: key={key}, retry_after={retry_after}s")
            raise RateLimitExceeded(key, retry_after, self.limit)

        state.count += 1

    def remaining(self, key: str) -> int:
        """Units left for ``key`` in its current window."""
        state = self._windows.get(key)
        if state is None or self._clock() - state.window_start >= self.window_seconds:
            return self.limit
        return max(0, self.limit - state.count)

    def reset(self, key: Optional[str] = None) -> None:
        """Forget one key's window, or all windows."""
        if key is None:
            self._windows.clear()
        else:
            self._windows.pop(key, None)

    def _prune(self, now: float) -> None:
        expired = [
            key for key, state in self._windows.items()
            if now - state.window_start >= self.window_seconds
        ]
        for key in expired:
            del self._windows[key]

        evicted = 0
        while len(self._windows) >= self.max_keys:
            del self._windows[next(iter(self._windows))]
            evicted += 1
        if evicted:
            logger.warning(f"Rate limiter tracking {self.max_keys} keys, evicted {evicted} live windows")
