"""SQLAlchemy repository base"""

from dataclasses import MISSING, fields
from typing import Any, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from ....domain.repositories.base import IRepository

T = TypeVar("T")


class SqlRepository(IRepository[T]):
    """Maps a domain dataclass onto an ORM model with identically named columns."""

    model_cls: Type = object
    entity_cls: Type = object

    def __init__(self, session: Session):
        self.session = session

    def _query(self):
        return self.session.query(self.model_cls)

    async def add(self, entity: T) -> T:
        model = self.model_cls()
        self._update_model_from_entity(model, entity)
        self.session.add(model)
        self.session.flush()
        entity.id = model.id
        return entity

    async def get_by_id(self, entity_id: int) -> Optional[T]:
        model = self.session.get(self.model_cls, entity_id)
        return self._map_to_entity(model) if model else None

    async def update(self, entity: T) -> T:
        model = self.session.get(self.model_cls, entity.id)
        if model:
            self._update_model_from_entity(model, entity)
            self.session.flush()
        return entity

    async def delete(self, entity_id: int) -> None:
        model = self.session.get(self.model_cls, entity_id)
        if model:
            self.session.delete(model)
            # Flush per delete so owned rows go before their owner
            self.session.flush()

    async def list_all(self) -> List[T]:
        models = self._query().order_by(self.model_cls.id).all()
        return [self._map_to_entity(model) for model in models]

    async def list_by(self, **criteria: Any) -> List[T]:
        models = self._query().filter_by(**criteria).order_by(self.model_cls.id).all()
        return [self._map_to_entity(model) for model in models]

    async def count_by(self, **criteria: Any) -> int:
        return self._query().filter_by(**criteria).count()

    def _find_one(self, **criteria: Any) -> Optional[T]:
        model = self._query().filter_by(**criteria).order_by(self.model_cls.id).first()
        return self._map_to_entity(model) if model else None

    def _update_model_from_entity(self, model, entity: T) -> None:
        """Update ORM model from domain entity"""
        for f in fields(self.entity_cls):
            if not f.init or f.name == "id":
                continue
            value = getattr(entity, f.name)
            if isinstance(value, list):
                # New list object so JSON columns register the change
                value = list(value)
            setattr(model, f.name, value)

    def _map_to_entity(self, model) -> T:
        """Map ORM model to domain entity"""
        values = {}
        for f in fields(self.entity_cls):
            if not f.init:
                continue
            value = getattr(model, f.name)
            if value is None and f.default_factory is not MISSING:
                value = f.default_factory()
            values[f.name] = value
        return self.entity_cls(**values)
