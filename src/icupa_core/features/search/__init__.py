"""Search feature."""

from .entities import SearchDocument
from .services import SearchUseCases

__all__ = ["SearchDocument", "SearchUseCases"]
