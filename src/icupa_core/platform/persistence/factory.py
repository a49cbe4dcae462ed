"""Repository resolution from settings."""

import logging
from typing import Any, Dict, Mapping, Optional, Type

from ...config.constants import RepositoryBackend
from ...config.settings import IcupaSettings
from ...core.entities.base import EntityModel
from ...core.exceptions import ConfigurationError
from ...core.protocols import EntityRepository
from .asyncpg_repository import AsyncpgEntityRepository
from .memory_repository import InMemoryEntityRepository

logger = logging.getLogger(__name__)


async def create_database_pool(settings: IcupaSettings) -> Any:
    """Create the asyncpg pool for the postgres backend."""
    import asyncpg

    if settings.database_url is None:
        raise ConfigurationError("DATABASE_URL is required for the postgres repository backend")

    return await asyncpg.create_pool(
        dsn=settings.database_url.get_secret_value(),
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )


def build_repositories(
    settings: IcupaSettings,
    schemas: Mapping[str, Type[EntityModel]],
    pool: Optional[Any] = None,
) -> Dict[str, EntityRepository]:
    """Create one repository per entity schema.

    Args:
        settings: Application settings
        schemas: Mapping of module name to entity schema
        pool: asyncpg pool, required for the postgres backend

    Raises:
        ConfigurationError: If the postgres backend is selected without a pool
    """
    if settings.repository_backend == RepositoryBackend.POSTGRES:
        if pool is None:
            raise ConfigurationError("A database pool is required for the postgres repository backend")
        logger.info(f"Using postgres repositories in schema '{settings.database_schema}'")
        return {
            name: AsyncpgEntityRepository(pool, schema, schema_name=settings.database_schema)
            for name, schema in schemas.items()
        }

    return {name: InMemoryEntityRepository(schema) for name, schema in schemas.items()}
