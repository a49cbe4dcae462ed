"""Users services."""

from .user_use_cases import UserUseCases

__all__ = ["UserUseCases"]
