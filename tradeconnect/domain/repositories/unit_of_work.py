"""Unit of Work interface for transaction management"""

from abc import ABC, abstractmethod

from .catalog_repositories import ICategoryRepository, IProductRepository
from .engagement_repositories import IFollowedSupplierRepository, ISavedProductRepository
from .inquiry_repository import IInquiryRepository
from .notification_repositories import IAdminNotificationRepository, INotificationRepository
from .profile_repositories import IBuyerRepository, ISupplierRepository
from .user_repository import IUserRepository


class IUnitOfWork(ABC):
    """Unit of Work interface for managing transactions across repositories"""

    users: IUserRepository
    suppliers: ISupplierRepository
    buyers: IBuyerRepository
    categories: ICategoryRepository
    products: IProductRepository
    inquiries: IInquiryRepository
    notifications: INotificationRepository
    admin_notifications: IAdminNotificationRepository
    saved_products: ISavedProductRepository
    followed_suppliers: IFollowedSupplierRepository

    @abstractmethod
    async def __aenter__(self):
        """Enter async context"""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context"""
        pass

    @abstractmethod
    async def commit(self):
        """Commit transaction"""
        pass

    @abstractmethod
    async def rollback(self):
        """Rollback transaction"""
        pass
