"""Entity repository implementations."""

from .memory_repository import InMemoryEntityRepository
from .asyncpg_repository import AsyncpgEntityRepository
from .factory import build_repositories, create_database_pool

__all__ = [
    "InMemoryEntityRepository",
    "AsyncpgEntityRepository",
    "build_repositories",
    "create_database_pool",
]
