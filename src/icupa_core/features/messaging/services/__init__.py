"""Messaging services."""

from .message_use_cases import MessageUseCases

__all__ = ["MessageUseCases"]
