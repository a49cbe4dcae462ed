"""Asyncpg-backed entity repository.

One table per entity with one column per model field. Dict and list
fields are stored as JSON text. Each of a schema's ``unique_fields`` must be
a UNIQUE column (``users.email``); the resulting ``UniqueViolationError`` is
raised as ``PersistenceError`` like any other database error.
"""

import json
import logging
import re
import typing
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

import asyncpg

from ...core.entities.base import EntityModel
from ...core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=EntityModel)

IDENTIFIER_PATTERN = re.compile(r"^[a-z_][a-z0-9_]*$")

DATABASE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def _is_json_annotation(annotation: Any) -> bool:
    origin = typing.get_origin(annotation)
    if origin in (dict, list):
        return True
    if origin is typing.Union:
        return any(_is_json_annotation(arg) for arg in typing.get_args(annotation))
    return False


class AsyncpgEntityRepository(Generic[T]):
    """Repository for one entity table reached through an asyncpg pool."""

    def __init__(
        self,
        pool: Any,
        schema: Type[T],
        schema_name: str = "public",
        table_name: Optional[str] = None,
    ):
        """Initialize repository.

        Args:
            pool: asyncpg connection pool
            schema: Entity model mapped to the table
            schema_name: Database schema holding the table
            table_name: Table name, defaults to ``schema.table_name``
        """
        if pool is None:
            raise ValueError("Database pool is required")

        table_name = table_name or schema.table_name
        for identifier in (schema_name, table_name):
            if not IDENTIFIER_PATTERN.match(identifier):
                raise ValueError(f"Invalid identifier: {identifier}")

        self._pool = pool
        self.schema = schema
        self.table = f"{schema_name}.{table_name}"
        self.columns = list(schema.model_fields)
        self.json_columns = {
            name for name, field in schema.model_fields.items()
            if _is_json_annotation(field.annotation)
        }

    @property
    def _column_list(self) -> str:
        return ", ".join(self.columns)

    def _to_row(self, data: T) -> List[Any]:
        values = data.model_dump()
        row = []
        for column in self.columns:
            value = values[column]
            if column in self.json_columns and value is not None:
                value = json.dumps(value, default=str)
            elif isinstance(value, Enum):
                value = value.value
            row.append(value)
        return row

    def _from_row(self, row: Any) -> T:
        values: Dict[str, Any] = dict(row)
        for column in self.json_columns:
            if isinstance(values.get(column), str):
                values[column] = json.loads(values[column])
        return self.schema.model_validate(values)

    def _persistence_error(self, operation: str, error: Exception) -> PersistenceError:
        logger.error(f"Failed to {operation} {self.schema.entity_name} in {self.table}: {error}")
        return PersistenceError(
            f"Failed to {operation} {self.schema.entity_name}",
            entity=self.schema.entity_name,
            details={"sqlstate": getattr(error, "sqlstate", None), "error": str(error)},
        )

    async def create(self, data: T) -> T:
        """Insert a record in a single statement and return the stored row."""
        placeholders = ", ".join(f"${index}" for index in range(1, len(self.columns) + 1))
        query = (
            f"INSERT INTO {self.table} ({self._column_list}) "
            f"VALUES ({placeholders}) RETURNING {self._column_list}"
        )

        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(query, *self._to_row(data))
        except DATABASE_ERRORS as e:
            raise self._persistence_error("create", e) from e

        if row is None:
            raise PersistenceError(
                f"Insert into {self.table} returned no row",
                entity=self.schema.entity_name,
            )
        return self._from_row(row)

    async def find_by_id(self, entity_id: str) -> Optional[T]:
        query = f"SELECT {self._column_list} FROM {self.table} WHERE id = $1"

        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(query, entity_id)
        except DATABASE_ERRORS as e:
            raise self._persistence_error("find", e) from e

        return self._from_row(row) if row else None

    async def list(self) -> List[T]:
        query = f"SELECT {self._column_list} FROM {self.table} ORDER BY created_at, id"

        try:
            async with self._pool.acquire() as conn:
                rows = await conn.fetch(query)
        except DATABASE_ERRORS as e:
            raise self._persistence_error("list", e) from e

        return [self._from_row(row) for row in rows]

    async def find_by_field(self, field: str, value: Any) -> Optional[T]:
        """Find the first record whose column equals ``value``."""
        if field not in self.columns:
            raise ValueError(f"Unknown column for {self.schema.entity_name}: {field}")

        query = (
            f"SELECT {self._column_list} FROM {self.table} "
            f"WHERE {field} = $1 ORDER BY created_at, id LIMIT 1"
        )

        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(query, value)
        except DATABASE_ERRORS as e:
            raise self._persistence_error("find", e) from e

        return self._from_row(row) if row else None
