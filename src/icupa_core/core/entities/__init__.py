"""Core entity building blocks."""

from .base import EntityModel, Currency, NonEmptyStr, ensure_utc

__all__ = ["EntityModel", "Currency", "NonEmptyStr", "ensure_utc"]
