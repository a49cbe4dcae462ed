"""Notifications services."""

from .notification_use_cases import NotificationUseCases

__all__ = ["NotificationUseCases"]
