"""In-memory Unit of Work"""

from typing import Any, Dict, Optional

from ....domain.repositories.unit_of_work import IUnitOfWork
from .store import (
    MemoryAdminNotificationRepository,
    MemoryBuyerRepository,
    MemoryCategoryRepository,
    MemoryFollowedSupplierRepository,
    MemoryInquiryRepository,
    MemoryNotificationRepository,
    MemoryProductRepository,
    MemorySavedProductRepository,
    MemoryStore,
    MemorySupplierRepository,
    MemoryUserRepository,
)


class MemoryUnitOfWork(IUnitOfWork):
    """Writes go straight to the shared store; rollback restores the
    snapshot taken on entry."""

    def __init__(self, store: MemoryStore):
        self.store = store
        self.users = MemoryUserRepository(store)
        self.suppliers = MemorySupplierRepository(store)
        self.buyers = MemoryBuyerRepository(store)
        self.categories = MemoryCategoryRepository(store)
        self.products = MemoryProductRepository(store)
        self.inquiries = MemoryInquiryRepository(store)
        self.notifications = MemoryNotificationRepository(store)
        self.admin_notifications = MemoryAdminNotificationRepository(store)
        self.saved_products = MemorySavedProductRepository(store)
        self.followed_suppliers = MemoryFollowedSupplierRepository(store)
        self._snapshot: Optional[Dict[str, Any]] = None
        self._committed = False

    async def __aenter__(self):
        self._snapshot = self.store.snapshot()
        self._committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            await self.rollback()
        elif not self._committed:
            await self.commit()

    async def commit(self) -> None:
        self._snapshot = self.store.snapshot()
        self._committed = True

    async def rollback(self) -> None:
        if self._snapshot is not None:
            self.store.restore(self._snapshot)
