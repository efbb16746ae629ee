from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ..core.config import Settings


def build_engine(settings: Settings) -> Engine:
    """Create the database engine for the configured environment."""
    if settings.TESTING:
        # Use in-memory SQLite for testing
        return create_engine(
            "sqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=settings.DATABASE_ECHO,
        )

    if settings.DATABASE_URL.startswith("sqlite"):
        return create_engine(
            settings.DATABASE_URL,
            connect_args={"check_same_thread": False},
            echo=settings.DATABASE_ECHO,
        )

    return create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=10,
        max_overflow=20,
        echo=settings.DATABASE_ECHO,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    """Create session factory"""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_tables(engine: Engine) -> None:
    """Create every table registered on Base (tests and local development)."""
    from ..infrastructure import orm  # noqa: F401  registers the models
    from .models import Base

    Base.metadata.create_all(bind=engine)
