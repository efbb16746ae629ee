"""Generic repository interface"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """CRUD contract shared by every entity store.

    ``list_by`` matches attributes by equality and returns records in id
    order; it is what the cascade routine uses to find owned records.
    """

    @abstractmethod
    async def add(self, entity: T) -> T:
        """Persist a new entity and return it with its id assigned"""
        pass

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[T]:
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        pass

    @abstractmethod
    async def delete(self, entity_id: int) -> None:
        """Hard delete; deleting a missing id is a no-op"""
        pass

    @abstractmethod
    async def list_all(self) -> List[T]:
        pass

    @abstractmethod
    async def list_by(self, **criteria: Any) -> List[T]:
        pass

    @abstractmethod
    async def count_by(self, **criteria: Any) -> int:
        pass
