"""Rate limiter protocol contract."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RateLimiter(Protocol):
    """Protocol for per-key request budgets.

    Implementations may be process-local or backed by shared state; all of
    them honour the same ``consume`` contract.
    """

    async def consume(self, key: str) -> None:
        """Consume one unit from the budget of ``key``.

        Raises:
            RateLimitExceeded: If the key exhausted its quota in the current
                window.
        """
        ...
