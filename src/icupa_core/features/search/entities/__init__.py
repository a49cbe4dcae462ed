"""Search entities."""

from .search_document import SearchDocument

__all__ = ["SearchDocument"]
