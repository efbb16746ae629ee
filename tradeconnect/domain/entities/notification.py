"""Notification entities"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..enums import AdminNotificationType, NotificationType


@dataclass
class Notification:
    user_id: int
    type: NotificationType
    title: str
    message: str
    id: Optional[int] = None
    is_read: bool = False
    action_url: Optional[str] = None
    action_text: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    read_at: Optional[datetime] = None

    def mark_read(self) -> None:
        if not self.is_read:
            self.is_read = True
            self.read_at = datetime.utcnow()


@dataclass
class AdminNotification:
    type: AdminNotificationType
    title: str
    message: str
    id: Optional[int] = None
    related_id: Optional[int] = None
    read: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)

    def mark_read(self) -> None:
        self.read = True
