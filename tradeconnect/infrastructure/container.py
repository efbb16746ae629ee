"""Wires the storage backend, email service and event dispatcher together"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from sqlalchemy.engine import Engine

from ..application.event_dispatcher import EventDispatcher
from ..core.config import Settings, settings as default_settings
from ..db.database import build_engine, build_session_factory
from ..domain.repositories.unit_of_work import IUnitOfWork
from .external_services.email_service import EmailService
from .repositories.memory.store import MemoryStore
from .repositories.memory.unit_of_work import MemoryUnitOfWork
from .repositories.sql.unit_of_work import UnitOfWorkImpl

logger = logging.getLogger(__name__)


@dataclass
class Container:
    unit_of_work_factory: Callable[[], IUnitOfWork]
    email_service: EmailService
    dispatcher: EventDispatcher
    config: Settings
    engine: Optional[Engine] = None


def build_container(config: Settings = None, email_service: EmailService = None) -> Container:
    """Build the object graph for ``config.STORAGE_BACKEND`` ("memory" or "sql")"""
    config = config or default_settings
    backend = config.STORAGE_BACKEND.lower()
    engine = None

    if backend == "memory":
        store = MemoryStore()

        def unit_of_work_factory() -> IUnitOfWork:
            return MemoryUnitOfWork(store)
    elif backend == "sql":
        engine = build_engine(config)
        session_factory = build_session_factory(engine)

        def unit_of_work_factory() -> IUnitOfWork:
            return UnitOfWorkImpl(session_factory)
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND '{config.STORAGE_BACKEND}'")

    logger.info("Using %s storage backend", backend)
    return Container(
        unit_of_work_factory=unit_of_work_factory,
        email_service=email_service or EmailService(config),
        dispatcher=EventDispatcher(unit_of_work_factory),
        config=config,
        engine=engine,
    )
