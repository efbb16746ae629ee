"""Repository implementations using SQLAlchemy models"""

from typing import Optional

from ....domain.entities.buyer import BuyerProfile
from ....domain.entities.category import Category
from ....domain.entities.engagement import FollowedSupplier, SavedProduct
from ....domain.entities.inquiry import Inquiry
from ....domain.entities.notification import AdminNotification, Notification
from ....domain.entities.product import Product
from ....domain.entities.supplier import SupplierProfile
from ....domain.entities.user import User
from ....domain.repositories.catalog_repositories import ICategoryRepository, IProductRepository
from ....domain.repositories.engagement_repositories import (
    IFollowedSupplierRepository,
    ISavedProductRepository,
)
from ....domain.repositories.inquiry_repository import IInquiryRepository
from ....domain.repositories.notification_repositories import (
    IAdminNotificationRepository,
    INotificationRepository,
)
from ....domain.repositories.profile_repositories import IBuyerRepository, ISupplierRepository
from ....domain.repositories.user_repository import IUserRepository
from ...orm import (
    AdminNotificationModel,
    BuyerProfileModel,
    CategoryModel,
    FollowedSupplierModel,
    InquiryModel,
    NotificationModel,
    ProductModel,
    SavedProductModel,
    SupplierProfileModel,
    UserModel,
)
from .base import SqlRepository


class UserRepositoryImpl(SqlRepository[User], IUserRepository):
    """Repository implementation for User aggregate"""

    model_cls = UserModel
    entity_cls = User

    async def get_by_email(self, email: str) -> Optional[User]:
        return self._find_one(email=email.lower())

    async def get_by_verification_token(self, token: str) -> Optional[User]:
        if not token:
            return None
        return self._find_one(email_verification_token=token)

    async def get_by_reset_token(self, token: str) -> Optional[User]:
        if not token:
            return None
        return self._find_one(password_reset_token=token)


class SupplierRepositoryImpl(SqlRepository[SupplierProfile], ISupplierRepository):
    model_cls = SupplierProfileModel
    entity_cls = SupplierProfile

    async def get_by_user_id(self, user_id: int) -> Optional[SupplierProfile]:
        return self._find_one(user_id=user_id)


class BuyerRepositoryImpl(SqlRepository[BuyerProfile], IBuyerRepository):
    model_cls = BuyerProfileModel
    entity_cls = BuyerProfile

    async def get_by_user_id(self, user_id: int) -> Optional[BuyerProfile]:
        return self._find_one(user_id=user_id)


class CategoryRepositoryImpl(SqlRepository[Category], ICategoryRepository):
    model_cls = CategoryModel
    entity_cls = Category


class ProductRepositoryImpl(SqlRepository[Product], IProductRepository):
    model_cls = ProductModel
    entity_cls = Product


class InquiryRepositoryImpl(SqlRepository[Inquiry], IInquiryRepository):
    model_cls = InquiryModel
    entity_cls = Inquiry


class NotificationRepositoryImpl(SqlRepository[Notification], INotificationRepository):
    model_cls = NotificationModel
    entity_cls = Notification


class AdminNotificationRepositoryImpl(SqlRepository[AdminNotification], IAdminNotificationRepository):
    model_cls = AdminNotificationModel
    entity_cls = AdminNotification


class SavedProductRepositoryImpl(SqlRepository[SavedProduct], ISavedProductRepository):
    model_cls = SavedProductModel
    entity_cls = SavedProduct


class FollowedSupplierRepositoryImpl(SqlRepository[FollowedSupplier], IFollowedSupplierRepository):
    model_cls = FollowedSupplierModel
    entity_cls = FollowedSupplier
