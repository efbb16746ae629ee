"""Notification DTOs"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ...domain.enums import AdminNotificationType, NotificationType


class NotificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    type: NotificationType
    title: str
    message: str
    is_read: bool
    action_url: Optional[str] = None
    action_text: Optional[str] = None
    created_at: datetime
    read_at: Optional[datetime] = None


class AdminNotificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: AdminNotificationType
    title: str
    message: str
    related_id: Optional[int] = None
    read: bool
    created_at: datetime


class UnreadCountResponse(BaseModel):
    count: int


class AdminNotificationCounts(BaseModel):
    suppliers: int = 0
    buyers: int = 0
    products: int = 0
    users: int = 0
    inquiries: int = 0


class MessageCount(BaseModel):
    message: str
    count: int
