"""Tests for entity repositories."""

import json

import asyncpg
import pytest
from unittest.mock import AsyncMock, MagicMock

from icupa_core.config.settings import IcupaSettings
from icupa_core.core.exceptions import ConfigurationError, PersistenceError
from icupa_core.features.listings import Listing
from icupa_core.features.registry import ENTITY_SCHEMAS
from icupa_core.features.tenants import Tenant
from icupa_core.features.users import User
from icupa_core.platform.persistence import (
    AsyncpgEntityRepository,
    InMemoryEntityRepository,
    build_repositories,
)


def _listing(**overrides):
    values = {
        "tenant_id": "tenant-1",
        "title": "Cabin",
        "description": "",
        "price_cents": 100,
        "currency": "USD",
    }
    values.update(overrides)
    return Listing(**values)


@pytest.fixture
def pool():
    """asyncpg pool mock whose acquire() yields ``pool.conn``."""
    conn = MagicMock()
    conn.fetchrow = AsyncMock()
    conn.fetch = AsyncMock(return_value=[])
    pool = MagicMock()
    pool.acquire.return_value.__aenter__.return_value = conn
    pool.conn = conn
    return pool


class TestInMemoryEntityRepository:

    @pytest.mark.asyncio
    async def test_create_and_find(self):
        repository = InMemoryEntityRepository(Listing)
        listing = _listing()

        assert await repository.create(listing) == listing
        assert await repository.find_by_id(listing.id) == listing
        assert await repository.find_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_duplicate_id_rejected_without_side_effects(self):
        repository = InMemoryEntityRepository(Listing)
        listing = _listing()
        await repository.create(listing)

        with pytest.raises(PersistenceError):
            await repository.create(_listing(id=listing.id, title="Other"))

        assert (await repository.find_by_id(listing.id)).title == "Cabin"
        assert len(repository) == 1

    @pytest.mark.asyncio
    async def test_find_by_field(self):
        repository = InMemoryEntityRepository(Listing)
        listing = await repository.create(_listing(title="Villa"))

        assert await repository.find_by_field("title", "Villa") == listing
        assert await repository.find_by_field("title", "Hut") is None

    @pytest.mark.asyncio
    async def test_unique_field_rejected_without_side_effects(self):
        repository = InMemoryEntityRepository(User)
        first = await repository.create(User(email="dup@example.com", display_name="First"))

        with pytest.raises(PersistenceError) as exc_info:
            await repository.create(User(email="DUP@example.com", display_name="Second"))

        assert exc_info.value.details == {"entity": "user", "field": "email"}
        assert await repository.list() == [first]

    @pytest.mark.asyncio
    async def test_fields_outside_unique_set_may_repeat(self):
        repository = InMemoryEntityRepository(Listing)
        await repository.create(_listing(title="Cabin"))
        await repository.create(_listing(title="Cabin"))

        assert len(repository) == 2


class TestAsyncpgEntityRepository:
    """Test SQL generation and error translation with a mocked pool."""

    @pytest.mark.asyncio
    async def test_create_inserts_all_columns(self, pool):
        repository = AsyncpgEntityRepository(pool, Listing, schema_name="tenant_a")
        listing = _listing()
        pool.conn.fetchrow.return_value = listing.model_dump()

        stored = await repository.create(listing)

        query, *args = pool.conn.fetchrow.await_args.args
        assert query.startswith("INSERT INTO tenant_a.listings (id, created_at, updated_at, tenant_id")
        assert "RETURNING" in query
        assert args[0] == listing.id
        assert stored == listing

    @pytest.mark.asyncio
    async def test_find_by_id_returns_none_when_missing(self, pool):
        repository = AsyncpgEntityRepository(pool, Tenant)
        pool.conn.fetchrow.return_value = None

        assert await repository.find_by_id("missing") is None
        query, entity_id = pool.conn.fetchrow.await_args.args
        assert query.endswith("FROM public.tenants WHERE id = $1")
        assert entity_id == "missing"

    @pytest.mark.asyncio
    async def test_list_orders_by_creation(self, pool):
        repository = AsyncpgEntityRepository(pool, Listing)
        pool.conn.fetch.return_value = [_listing(title="A").model_dump(), _listing(title="B").model_dump()]

        records = await repository.list()

        assert [record.title for record in records] == ["A", "B"]
        assert "ORDER BY created_at, id" in pool.conn.fetch.await_args.args[0]

    @pytest.mark.asyncio
    async def test_database_error_becomes_persistence_error(self, pool):
        repository = AsyncpgEntityRepository(pool, Listing)
        pool.conn.fetchrow.side_effect = asyncpg.PostgresError("unique violation")

        with pytest.raises(PersistenceError) as exc_info:
            await repository.create(_listing())

        assert exc_info.value.entity == "listing"

    @pytest.mark.asyncio
    async def test_unique_violation_becomes_persistence_error(self, pool):
        repository = AsyncpgEntityRepository(pool, User)
        pool.conn.fetchrow.side_effect = asyncpg.UniqueViolationError("duplicate key value violates users_email_key")

        with pytest.raises(PersistenceError) as exc_info:
            await repository.create(User(email="dup@example.com", display_name="Dup"))

        assert exc_info.value.details["sqlstate"] == "23505"

    @pytest.mark.asyncio
    async def test_find_by_field_rejects_unknown_column(self, pool):
        repository = AsyncpgEntityRepository(pool, Listing)

        with pytest.raises(ValueError):
            await repository.find_by_field("title; DROP TABLE listings", "x")

    def test_json_columns_detected(self, pool):
        from typing import ClassVar, Dict, List, Optional

        from icupa_core.core.entities import EntityModel

        class Preferences(EntityModel):
            entity_name: ClassVar[str] = "preferences"
            table_name: ClassVar[str] = "preferences"
            options: Dict[str, str]
            tags: Optional[List[str]] = None

        repository = AsyncpgEntityRepository(pool, Preferences)
        row = repository._to_row(Preferences(options={"lang": "rw"}))

        assert repository.json_columns == {"options", "tags"}
        assert json.loads(row[repository.columns.index("options")]) == {"lang": "rw"}

    def test_invalid_identifier_rejected(self, pool):
        with pytest.raises(ValueError):
            AsyncpgEntityRepository(pool, Listing, schema_name="public; --")


class TestBuildRepositories:

    def test_memory_backend(self, settings):
        repositories = build_repositories(settings, ENTITY_SCHEMAS)

        assert set(repositories) == set(ENTITY_SCHEMAS)
        assert all(isinstance(repo, InMemoryEntityRepository) for repo in repositories.values())

    def test_postgres_backend_requires_pool(self):
        settings = IcupaSettings(_env_file=None, repository_backend="postgres")

        with pytest.raises(ConfigurationError):
            build_repositories(settings, ENTITY_SCHEMAS)

    def test_postgres_backend(self, pool):
        settings = IcupaSettings(_env_file=None, repository_backend="postgres", database_schema="icupa")

        repositories = build_repositories(settings, {"tenants": Tenant}, pool=pool)

        assert repositories["tenants"].table == "icupa.tenants"
