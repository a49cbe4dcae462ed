"""Files services."""

from .file_use_cases import FileUseCases

__all__ = ["FileUseCases"]
