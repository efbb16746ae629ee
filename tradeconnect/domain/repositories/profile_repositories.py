"""Supplier and buyer profile repository interfaces"""

from abc import abstractmethod
from typing import Optional

from ..entities.buyer import BuyerProfile
from ..entities.supplier import SupplierProfile
from .base import IRepository


class ISupplierRepository(IRepository[SupplierProfile]):

    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> Optional[SupplierProfile]:
        pass


class IBuyerRepository(IRepository[BuyerProfile]):

    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> Optional[BuyerProfile]:
        pass
