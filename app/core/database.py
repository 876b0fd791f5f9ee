"""
Database engine and session management.
Async SQLAlchemy engine, declarative base and the FastAPI session dependency.
"""

import logging
from typing import AsyncGenerator
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.core.config import settings
from app.core.exceptions import StoreError


logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all models."""
    pass


_is_sqlite = settings.DATABASE_URL.startswith("sqlite")

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=False,
    pool_pre_ping=not _is_sqlite,
    connect_args={"check_same_thread": False} if _is_sqlite else {},
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for async session injection.
    Commits when the request succeeds, rolls back otherwise.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError as exc:
            await session.rollback()
            logger.exception("Database error, transaction rolled back")
            raise StoreError() from exc
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create all tables (development only, migrations handle production)."""
    # Register models on the metadata
    import app.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose of the engine connection pool."""
    await engine.dispose()
