"""Reading and acknowledging user and admin notifications"""

from typing import List

from ...domain.enums import AdminNotificationType
from ...domain.exceptions import PermissionDeniedError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.notification_dtos import (
    AdminNotificationCounts,
    AdminNotificationResponse,
    MessageCount,
    NotificationResponse,
    UnreadCountResponse,
)
from .common import get_or_raise

# Admin sidebar badge each notification type counts towards
ADMIN_COUNT_BUCKETS = {
    AdminNotificationType.NEW_SUPPLIER: "suppliers",
    AdminNotificationType.NEW_BUYER: "buyers",
    AdminNotificationType.NEW_PRODUCT: "products",
    AdminNotificationType.NEW_USER_REGISTRATION: "users",
    AdminNotificationType.NEW_INQUIRY: "inquiries",
}


def _newest_first(records: list) -> list:
    return sorted(records, key=lambda n: (n.created_at, n.id), reverse=True)


class NotificationUseCase:
    """Notifications addressed to one user"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def _owned(self, user_id: int, notification_id: int):
        notification = await get_or_raise(self.unit_of_work.notifications, notification_id, "Notification")
        if notification.user_id != user_id:
            raise PermissionDeniedError("This notification belongs to another user")
        return notification

    async def list_for_user(self, user_id: int) -> List[NotificationResponse]:
        async with self.unit_of_work:
            notifications = await self.unit_of_work.notifications.list_by(user_id=user_id)
            return [NotificationResponse.model_validate(n) for n in _newest_first(notifications)]

    async def unread_count(self, user_id: int) -> UnreadCountResponse:
        async with self.unit_of_work:
            count = await self.unit_of_work.notifications.count_by(user_id=user_id, is_read=False)
            return UnreadCountResponse(count=count)

    async def mark_read(self, user_id: int, notification_id: int) -> NotificationResponse:
        async with self.unit_of_work:
            notification = await self._owned(user_id, notification_id)
            notification.mark_read()
            await self.unit_of_work.notifications.update(notification)
            await self.unit_of_work.commit()
            return NotificationResponse.model_validate(notification)

    async def mark_all_read(self, user_id: int) -> MessageCount:
        async with self.unit_of_work:
            unread = await self.unit_of_work.notifications.list_by(user_id=user_id, is_read=False)
            for notification in unread:
                notification.mark_read()
                await self.unit_of_work.notifications.update(notification)
            await self.unit_of_work.commit()
            return MessageCount(message="All notifications marked as read", count=len(unread))

    async def delete(self, user_id: int, notification_id: int) -> None:
        async with self.unit_of_work:
            await self._owned(user_id, notification_id)
            await self.unit_of_work.notifications.delete(notification_id)
            await self.unit_of_work.commit()


class AdminNotificationUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def list_notifications(self) -> List[AdminNotificationResponse]:
        async with self.unit_of_work:
            notifications = await self.unit_of_work.admin_notifications.list_all()
            return [AdminNotificationResponse.model_validate(n) for n in _newest_first(notifications)]

    async def counts(self) -> AdminNotificationCounts:
        """Unread admin notifications grouped by sidebar section"""
        async with self.unit_of_work:
            unread = await self.unit_of_work.admin_notifications.list_by(read=False)

        counts = dict.fromkeys(ADMIN_COUNT_BUCKETS.values(), 0)
        for notification in unread:
            counts[ADMIN_COUNT_BUCKETS[notification.type]] += 1
        return AdminNotificationCounts(**counts)

    async def mark_read(self, notification_id: int) -> AdminNotificationResponse:
        async with self.unit_of_work:
            notification = await get_or_raise(
                self.unit_of_work.admin_notifications, notification_id, "Notification"
            )
            notification.mark_read()
            await self.unit_of_work.admin_notifications.update(notification)
            await self.unit_of_work.commit()
            return AdminNotificationResponse.model_validate(notification)
