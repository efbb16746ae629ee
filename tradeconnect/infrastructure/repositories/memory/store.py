"""In-memory storage backend"""

import copy
from typing import Any, Dict, List, Optional, Type, TypeVar

from ....domain.entities.buyer import BuyerProfile
from ....domain.entities.category import Category
from ....domain.entities.engagement import FollowedSupplier, SavedProduct
from ....domain.entities.inquiry import Inquiry
from ....domain.entities.notification import AdminNotification, Notification
from ....domain.entities.product import Product
from ....domain.entities.supplier import SupplierProfile
from ....domain.entities.user import User
from ....domain.repositories.base import IRepository
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

T = TypeVar("T")


class MemoryStore:
    """Tables of detached entity copies keyed by id, plus id sequences."""

    def __init__(self):
        self.tables: Dict[str, Dict[int, Any]] = {}
        self.sequences: Dict[str, int] = {}

    def table(self, name: str) -> Dict[int, Any]:
        return self.tables.setdefault(name, {})

    def next_id(self, name: str) -> int:
        self.sequences[name] = self.sequences.get(name, 0) + 1
        return self.sequences[name]

    def snapshot(self) -> Dict[str, Any]:
        return {
            "tables": {name: dict(rows) for name, rows in self.tables.items()},
            "sequences": dict(self.sequences),
        }

    def restore(self, snapshot: Dict[str, Any]) -> None:
        self.tables = {name: dict(rows) for name, rows in snapshot["tables"].items()}
        self.sequences = dict(snapshot["sequences"])


def _detach(entity):
    """Copy an entity so callers never share state with the store."""
    clone = copy.deepcopy(entity)
    if hasattr(clone, "_events"):
        clone._events = []
    return clone


class MemoryRepository(IRepository[T]):
    """Repository over one MemoryStore table.

    Stored rows are replaced, never mutated in place, so a snapshot taken
    by the unit of work only has to copy the per-table dicts.
    """

    table_name: str = ""
    entity_cls: Type = object

    def __init__(self, store: MemoryStore):
        self.store = store

    @property
    def _rows(self) -> Dict[int, T]:
        return self.store.table(self.table_name)

    async def add(self, entity: T) -> T:
        entity.id = self.store.next_id(self.table_name)
        self._rows[entity.id] = _detach(entity)
        return entity

    async def get_by_id(self, entity_id: int) -> Optional[T]:
        row = self._rows.get(entity_id)
        return _detach(row) if row is not None else None

    async def update(self, entity: T) -> T:
        if entity.id in self._rows:
            self._rows[entity.id] = _detach(entity)
        return entity

    async def delete(self, entity_id: int) -> None:
        self._rows.pop(entity_id, None)

    async def list_all(self) -> List[T]:
        return [_detach(self._rows[key]) for key in sorted(self._rows)]

    async def list_by(self, **criteria: Any) -> List[T]:
        return [
            _detach(row) for key, row in sorted(self._rows.items())
            if _matches(row, criteria)
        ]

    async def count_by(self, **criteria: Any) -> int:
        return sum(1 for row in self._rows.values() if _matches(row, criteria))

    def _find_one(self, **criteria: Any) -> Optional[T]:
        for key in sorted(self._rows):
            row = self._rows[key]
            if _matches(row, criteria):
                return _detach(row)
        return None


def _matches(row: Any, criteria: Dict[str, Any]) -> bool:
    return all(getattr(row, name) == value for name, value in criteria.items())


class MemoryUserRepository(MemoryRepository[User], IUserRepository):
    table_name = "users"
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


class MemorySupplierRepository(MemoryRepository[SupplierProfile], ISupplierRepository):
    table_name = "supplier_profiles"
    entity_cls = SupplierProfile

    async def get_by_user_id(self, user_id: int) -> Optional[SupplierProfile]:
        return self._find_one(user_id=user_id)


class MemoryBuyerRepository(MemoryRepository[BuyerProfile], IBuyerRepository):
    table_name = "buyer_profiles"
    entity_cls = BuyerProfile

    async def get_by_user_id(self, user_id: int) -> Optional[BuyerProfile]:
        return self._find_one(user_id=user_id)


class MemoryCategoryRepository(MemoryRepository[Category], ICategoryRepository):
    table_name = "categories"
    entity_cls = Category


class MemoryProductRepository(MemoryRepository[Product], IProductRepository):
    table_name = "products"
    entity_cls = Product


class MemoryInquiryRepository(MemoryRepository[Inquiry], IInquiryRepository):
    table_name = "inquiries"
    entity_cls = Inquiry


class MemoryNotificationRepository(MemoryRepository[Notification], INotificationRepository):
    table_name = "notifications"
    entity_cls = Notification


class MemoryAdminNotificationRepository(MemoryRepository[AdminNotification], IAdminNotificationRepository):
    table_name = "admin_notifications"
    entity_cls = AdminNotification


class MemorySavedProductRepository(MemoryRepository[SavedProduct], ISavedProductRepository):
    table_name = "saved_products"
    entity_cls = SavedProduct


class MemoryFollowedSupplierRepository(MemoryRepository[FollowedSupplier], IFollowedSupplierRepository):
    table_name = "followed_suppliers"
    entity_cls = FollowedSupplier
