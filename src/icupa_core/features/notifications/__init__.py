"""Notifications feature."""

from .entities import Notification
from .services import NotificationUseCases

__all__ = ["Notification", "NotificationUseCases"]
