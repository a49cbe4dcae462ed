"""Files feature."""

from .entities import FileRecord
from .services import FileUseCases

__all__ = ["FileRecord", "FileUseCases"]
