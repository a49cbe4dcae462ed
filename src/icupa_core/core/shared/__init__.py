"""Shared core types."""

from .context import UseCaseContext, system_context

__all__ = ["UseCaseContext", "system_context"]
