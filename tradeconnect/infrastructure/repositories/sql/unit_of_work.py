"""Unit of Work implementation backed by a SQLAlchemy session"""

from typing import Optional

from sqlalchemy.orm import Session, sessionmaker

from ....domain.repositories.unit_of_work import IUnitOfWork
from .repositories import (
    AdminNotificationRepositoryImpl,
    BuyerRepositoryImpl,
    CategoryRepositoryImpl,
    FollowedSupplierRepositoryImpl,
    InquiryRepositoryImpl,
    NotificationRepositoryImpl,
    ProductRepositoryImpl,
    SavedProductRepositoryImpl,
    SupplierRepositoryImpl,
    UserRepositoryImpl,
)


class UnitOfWorkImpl(IUnitOfWork):
    """Opens one session per ``async with`` block."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory
        self.session: Optional[Session] = None
        self._committed = False

    async def __aenter__(self):
        self.session = self.session_factory()
        self.users = UserRepositoryImpl(self.session)
        self.suppliers = SupplierRepositoryImpl(self.session)
        self.buyers = BuyerRepositoryImpl(self.session)
        self.categories = CategoryRepositoryImpl(self.session)
        self.products = ProductRepositoryImpl(self.session)
        self.inquiries = InquiryRepositoryImpl(self.session)
        self.notifications = NotificationRepositoryImpl(self.session)
        self.admin_notifications = AdminNotificationRepositoryImpl(self.session)
        self.saved_products = SavedProductRepositoryImpl(self.session)
        self.followed_suppliers = FollowedSupplierRepositoryImpl(self.session)
        self._committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type:
                await self.rollback()
            elif not self._committed:
                await self.commit()
        finally:
            self.session.close()
            self.session = None

    async def commit(self) -> None:
        """Commit transaction"""
        try:
            self.session.commit()
            self._committed = True
        except Exception:
            self.session.rollback()
            raise

    async def rollback(self) -> None:
        """Rollback transaction"""
        self.session.rollback()
