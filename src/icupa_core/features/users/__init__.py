"""Users feature."""

from .entities import User
from .services import UserUseCases

__all__ = ["User", "UserUseCases"]
