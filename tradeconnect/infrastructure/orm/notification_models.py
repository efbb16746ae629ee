"""Notification ORM models"""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func

from ...db.models import Base
from ...domain.enums import AdminNotificationType, NotificationType
from .types import enum_column_type


class NotificationModel(Base):
    __tablename__ = 'notifications'

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    type = Column(enum_column_type(NotificationType), nullable=False)
    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, default=False, nullable=False)
    action_url = Column(String, nullable=True)
    action_text = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    read_at = Column(DateTime, nullable=True)


class AdminNotificationModel(Base):
    __tablename__ = 'admin_notifications'

    id = Column(Integer, primary_key=True, index=True)
    type = Column(enum_column_type(AdminNotificationType), nullable=False, index=True)
    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    related_id = Column(Integer, nullable=True)
    read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
