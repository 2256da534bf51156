"""Async database engine, session factory and transaction scope."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.exc import DatabaseError, IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from fitplan.core.config import Settings
from fitplan.core.exceptions import StorageError
from fitplan.db.base import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores FOREIGN KEY clauses unless enabled per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_for(url: str, *, echo: bool = False, timeout: float = 5.0) -> AsyncEngine:
    """Create an async SQLite engine with foreign keys enforced and a bounded lock wait."""
    engine = create_async_engine(url, echo=echo, connect_args={"timeout": timeout})
    event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return create_engine_for(
        settings.async_database_url,
        echo=settings.debug,
        timeout=settings.database_timeout_seconds,
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


def _is_storage_failure(exc: Exception) -> bool:
    return isinstance(exc, (OperationalError, DatabaseError)) and not isinstance(exc, IntegrityError)


@asynccontextmanager
async def session_scope(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """
    One unit of work: commit on success, roll back on any error.
    Driver-level failures (locked or corrupt file, disk errors) surface as StorageError.
    """
    async with session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception as e:
            await session.rollback()
            if _is_storage_failure(e):
                logger.error("Storage failure, transaction rolled back: %s", e)
                raise StorageError(str(e)) from e
            raise


async def begin_immediate(db: AsyncSession) -> None:
    """
    Open the session's transaction with SQLite's write lock held (BEGIN IMMEDIATE).
    Must be the first statement of the session. Other writers wait up to the busy
    timeout, so a read-then-write sequence cannot interleave with theirs.
    """
    conn = await db.connection()
    await conn.exec_driver_sql("BEGIN IMMEDIATE")


async def init_db(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    import fitplan.models  # noqa: F401 - register all models on Base.metadata

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (OperationalError, DatabaseError) as e:
        logger.error("Could not create schema: %s", e)
        raise StorageError(str(e)) from e
    logger.debug("Schema ready")
