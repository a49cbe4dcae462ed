"""Authentication services."""

from .auth_use_cases import AuthUseCases
from .repository_authenticator import RepositoryAuthenticator

__all__ = ["AuthUseCases", "RepositoryAuthenticator"]
