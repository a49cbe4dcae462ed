"""Messaging feature."""

from .entities import Message
from .services import MessageUseCases

__all__ = ["Message", "MessageUseCases"]
