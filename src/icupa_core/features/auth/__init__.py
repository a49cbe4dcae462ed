"""Authentication feature."""

from .entities import AuthSession
from .services import AuthUseCases, RepositoryAuthenticator

__all__ = ["AuthSession", "AuthUseCases", "RepositoryAuthenticator"]
