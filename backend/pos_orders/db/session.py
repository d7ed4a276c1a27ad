"""Database engine and session configuration."""

from collections.abc import Generator
from functools import lru_cache

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session
from sqlmodel import SQLModel

# Register all models with SQLAlchemy metadata
import pos_orders.models  # noqa: F401
from pos_orders.config import settings


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for the given URL.

    SQLite (development and tests) gets a thread-shareable connection and the
    driver's default pool; server databases get a bounded, pre-pinged pool.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=False,  # SQL logging controlled via structlog configuration
            connect_args={"check_same_thread": False},
        )
    return create_engine(
        database_url,
        echo=False,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,  # Verify connections before use
        pool_recycle=300,  # Recycle connections after 5 minutes
    )


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Return the application engine, created on first use."""
    return create_db_engine(settings.database_url)


def create_tables(engine: Engine) -> None:
    """Create all tables from model metadata (development and tests).

    Production schemas are managed by Alembic migrations.
    """
    SQLModel.metadata.create_all(engine)


def get_session() -> Generator[Session]:
    """Dependency that provides a database session."""
    with Session(get_engine(), expire_on_commit=False) as session:
        yield session


def dispose_engine() -> None:
    """Dispose of the engine and release all connections.

    Should be called during application shutdown.
    """
    if get_engine.cache_info().currsize:
        get_engine().dispose()
