"""Saved product and followed supplier repository interfaces"""

from ..entities.engagement import FollowedSupplier, SavedProduct
from .base import IRepository


class ISavedProductRepository(IRepository[SavedProduct]):
    pass


class IFollowedSupplierRepository(IRepository[FollowedSupplier]):
    pass
