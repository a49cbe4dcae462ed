"""Notification use-cases."""

from ....platform.use_cases import DomainUseCases
from ..entities.notification import Notification


class NotificationUseCases(DomainUseCases[Notification]):
    pass
