"""Pytest configuration and fixtures for icupa-core tests."""

import pytest
from unittest.mock import MagicMock

from icupa_core.config.settings import IcupaSettings
from icupa_core.core.shared.context import UseCaseContext
from icupa_core.features.registry import ENTITY_SCHEMAS, build_module_registry
from icupa_core.platform.persistence import InMemoryEntityRepository
from icupa_core.platform.providers import (
    MockMessagingProvider,
    MockPaymentProvider,
    MockSearchProvider,
    Providers,
)
from icupa_core.platform.rate_limiting import InMemoryRateLimiter


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def settings():
    """Settings isolated from the environment's .env file."""
    return IcupaSettings(_env_file=None, environment="test")


@pytest.fixture
def context():
    """Context of an authenticated actor."""
    return UseCaseContext(actor_id="actor", correlation_id="corr-1")


@pytest.fixture
def anonymous_context():
    return UseCaseContext(actor_id="")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def audit_logger():
    """Audit logger recording calls."""
    return MagicMock()


@pytest.fixture
def rate_limiter(clock):
    return InMemoryRateLimiter(limit=100, window_seconds=60, clock=clock)


@pytest.fixture
def providers():
    return Providers(
        payment=MockPaymentProvider(),
        search=MockSearchProvider(),
        messaging=MockMessagingProvider(),
    )


@pytest.fixture
def repositories():
    return {name: InMemoryEntityRepository(schema) for name, schema in ENTITY_SCHEMAS.items()}


@pytest.fixture
def registry(settings, repositories, providers, audit_logger, rate_limiter):
    """Registry over in-memory repositories and mock providers."""
    return build_module_registry(
        settings,
        repositories=repositories,
        providers=providers,
        audit_logger=audit_logger,
        rate_limiter=rate_limiter,
    )


@pytest.fixture
def recorded_events(audit_logger):
    """Callable returning event names recorded on the audit logger, in order."""
    return lambda: [call.args[0] for call in audit_logger.record.call_args_list]
