"""Search services."""

from .search_use_cases import SearchUseCases

__all__ = ["SearchUseCases"]
