"""Tests for the generic entity use-cases."""

import uuid

import pytest
from unittest.mock import AsyncMock, MagicMock

from icupa_core.core.exceptions import (
    AuthorizationError,
    PersistenceError,
    RateLimitExceeded,
    ValidationError,
)
from icupa_core.core.shared.context import UseCaseContext
from icupa_core.features.tenants import Tenant
from icupa_core.platform.persistence import InMemoryEntityRepository
from icupa_core.platform.rate_limiting import InMemoryRateLimiter
from icupa_core.platform.use_cases import create_use_cases

VALID_TENANT = {"name": "Kigali Bistro", "slug": "kigali-bistro"}


@pytest.fixture
def repository():
    return InMemoryEntityRepository(Tenant)


@pytest.fixture
def use_cases(repository, audit_logger, rate_limiter):
    return create_use_cases(Tenant, repository, audit_logger, rate_limiter)


class TestCreate:
    """Test the create operation."""

    @pytest.mark.asyncio
    async def test_populates_system_fields(self, use_cases, context):
        record = await use_cases.create(VALID_TENANT, context)

        assert uuid.UUID(record.id).version == 7
        assert record.created_at is not None
        assert record.updated_at is not None
        assert record.name == "Kigali Bistro"

    @pytest.mark.asyncio
    async def test_discards_caller_supplied_system_fields(self, use_cases, context):
        record = await use_cases.create({**VALID_TENANT, "id": "chosen-by-caller"}, context)

        assert record.id != "chosen-by-caller"

    @pytest.mark.asyncio
    async def test_record_is_retrievable_after_create(self, use_cases, context):
        record = await use_cases.create(VALID_TENANT, context)

        assert await use_cases.get(record.id, context) == record

    @pytest.mark.asyncio
    async def test_records_audit_event_with_result(self, use_cases, context, audit_logger):
        record = await use_cases.create(VALID_TENANT, context)

        audit_logger.record.assert_called_once()
        event, payload = audit_logger.record.call_args.args
        assert event == "tenant.create"
        assert payload["name"] == "Kigali Bistro"
        assert payload["result"]["id"] == record.id
        assert payload["context"] == {"actor_id": "actor", "correlation_id": "corr-1"}

    @pytest.mark.asyncio
    async def test_schema_violation_never_reaches_repository(self, audit_logger, rate_limiter, context):
        repository = AsyncMock()
        use_cases = create_use_cases(Tenant, repository, audit_logger, rate_limiter)

        with pytest.raises(ValidationError) as exc_info:
            await use_cases.create({"name": "", "slug": "Not A Slug!"}, context)

        fields = {issue["field"] for issue in exc_info.value.issues}
        assert fields == {"name", "slug"}
        repository.create.assert_not_awaited()
        audit_logger.record.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_fields_rejected(self, use_cases, context):
        with pytest.raises(ValidationError):
            await use_cases.create({**VALID_TENANT, "owner": "someone"}, context)

    @pytest.mark.asyncio
    async def test_non_mapping_input_rejected(self, use_cases, context):
        with pytest.raises(ValidationError) as exc_info:
            await use_cases.create(["not", "an", "object"], context)

        assert exc_info.value.issues[0]["type"] == "dict_type"

    @pytest.mark.asyncio
    async def test_missing_actor_rejected_before_rate_limit(self, repository, audit_logger):
        rate_limiter = AsyncMock()
        use_cases = create_use_cases(Tenant, repository, audit_logger, rate_limiter)

        with pytest.raises(AuthorizationError):
            await use_cases.create(VALID_TENANT, UseCaseContext(actor_id=""))

        rate_limiter.consume.assert_not_awaited()
        assert len(repository) == 0

    @pytest.mark.asyncio
    async def test_rate_limit_key(self, repository, audit_logger, context):
        rate_limiter = AsyncMock()
        use_cases = create_use_cases(Tenant, repository, audit_logger, rate_limiter)

        await use_cases.create(VALID_TENANT, context)

        rate_limiter.consume.assert_awaited_once_with("actor:tenant:create")

    @pytest.mark.asyncio
    async def test_quota_plus_one_fails_without_repository_call(self, audit_logger, clock, context):
        repository = AsyncMock()
        repository.create.side_effect = lambda record: record
        use_cases = create_use_cases(
            Tenant, repository, audit_logger, InMemoryRateLimiter(limit=3, window_seconds=60, clock=clock)
        )

        for _ in range(3):
            await use_cases.create(VALID_TENANT, context)

        with pytest.raises(RateLimitExceeded) as exc_info:
            await use_cases.create(VALID_TENANT, context)

        assert repository.create.await_count == 3
        assert exc_info.value.key == "actor:tenant:create"

    @pytest.mark.asyncio
    async def test_rate_limit_applies_before_validation(self, repository, audit_logger, context):
        rate_limiter = AsyncMock()
        rate_limiter.consume.side_effect = RateLimitExceeded("actor:tenant:create", 30)
        use_cases = create_use_cases(Tenant, repository, audit_logger, rate_limiter)

        with pytest.raises(RateLimitExceeded):
            await use_cases.create({"name": ""}, context)

    @pytest.mark.asyncio
    async def test_audit_failure_is_contained(self, repository, rate_limiter, context):
        audit_logger = MagicMock()
        audit_logger.record.side_effect = RuntimeError("sink closed")
        use_cases = create_use_cases(Tenant, repository, audit_logger, rate_limiter)

        record = await use_cases.create(VALID_TENANT, context)

        assert await repository.find_by_id(record.id) == record

    @pytest.mark.asyncio
    async def test_persistence_error_propagates_without_audit(self, audit_logger, rate_limiter, context):
        repository = AsyncMock()
        repository.create.side_effect = PersistenceError("connection reset", entity="tenant")
        use_cases = create_use_cases(Tenant, repository, audit_logger, rate_limiter)

        with pytest.raises(PersistenceError):
            await use_cases.create(VALID_TENANT, context)

        audit_logger.record.assert_not_called()

    @pytest.mark.asyncio
    async def test_steps_run_in_order(self, context):
        calls = []
        rate_limiter = AsyncMock()
        rate_limiter.consume.side_effect = lambda key: calls.append("rate_limit")
        repository = AsyncMock()

        async def persist(record):
            calls.append("persist")
            return record

        repository.create.side_effect = persist
        audit_logger = MagicMock()
        audit_logger.record.side_effect = lambda event, payload: calls.append("audit")

        async def after_persist(record):
            calls.append("provider")

        use_cases = create_use_cases(Tenant, repository, audit_logger, rate_limiter)
        await use_cases.create(VALID_TENANT, context, after_persist=after_persist)

        assert calls == ["rate_limit", "persist", "provider", "audit"]

    @pytest.mark.asyncio
    async def test_after_persist_failure_skips_audit(self, use_cases, repository, context, audit_logger):
        async def after_persist(record):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await use_cases.create(VALID_TENANT, context, after_persist=after_persist)

        assert len(repository) == 1
        audit_logger.record.assert_not_called()

    @pytest.mark.asyncio
    async def test_before_persist_result_is_stored(self, use_cases, repository, context):
        async def rename(candidate):
            return candidate.model_copy(update={"region": "rw-kigali"})

        record = await use_cases.create(VALID_TENANT, context, before_persist=rename)

        assert record.region == "rw-kigali"
        assert (await repository.find_by_id(record.id)).region == "rw-kigali"

    @pytest.mark.asyncio
    async def test_before_persist_runs_after_rate_limit(self, repository, audit_logger, context):
        calls = []
        rate_limiter = AsyncMock()
        rate_limiter.consume.side_effect = lambda key: calls.append("rate_limit")

        async def before_persist(candidate):
            calls.append("transform")
            return candidate

        use_cases = create_use_cases(Tenant, repository, audit_logger, rate_limiter)
        await use_cases.create(VALID_TENANT, context, before_persist=before_persist)

        assert calls == ["rate_limit", "transform"]

    @pytest.mark.asyncio
    async def test_before_persist_skipped_when_rate_limited(self, repository, audit_logger, context):
        rate_limiter = AsyncMock()
        rate_limiter.consume.side_effect = RateLimitExceeded("actor:tenant:create", 30)
        before_persist = AsyncMock()
        use_cases = create_use_cases(Tenant, repository, audit_logger, rate_limiter)

        with pytest.raises(RateLimitExceeded):
            await use_cases.create(VALID_TENANT, context, before_persist=before_persist)

        before_persist.assert_not_awaited()
        assert len(repository) == 0


class TestRead:
    """Test the get and list operations."""

    @pytest.mark.asyncio
    async def test_get_unknown_returns_none(self, use_cases, context):
        assert await use_cases.get("missing", context) is None

    @pytest.mark.asyncio
    async def test_list_is_idempotent(self, use_cases, context):
        await use_cases.create(VALID_TENANT, context)
        await use_cases.create({"name": "Lake Lodge", "slug": "lake-lodge"}, context)

        first = await use_cases.list(context)
        second = await use_cases.list(context)

        assert first == second
        assert len(first) == 2

    @pytest.mark.asyncio
    async def test_reads_require_actor(self, use_cases, anonymous_context):
        with pytest.raises(AuthorizationError):
            await use_cases.list(anonymous_context)
        with pytest.raises(AuthorizationError):
            await use_cases.get("any", anonymous_context)

    @pytest.mark.asyncio
    async def test_reads_do_not_consume_rate_limit(self, use_cases, rate_limiter, context):
        await use_cases.list(context)
        await use_cases.get("any", context)

        assert rate_limiter.remaining("actor:tenant:create") == rate_limiter.limit
