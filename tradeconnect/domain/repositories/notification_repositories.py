"""Notification repository interfaces"""

from ..entities.notification import AdminNotification, Notification
from .base import IRepository


class INotificationRepository(IRepository[Notification]):
    pass


class IAdminNotificationRepository(IRepository[AdminNotification]):
    pass
