from contextlib import asynccontextmanager
from typing import Any
import logging

from sqlalchemy import event, text, Result, CursorResult
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession, AsyncEngine
from sqlalchemy.orm import Session

import config
from config import DatabaseConfig
from exceptions.database import (
    DatabaseConnectionException,
    StoreAlreadyInitializedException,
    StoreNotInitializedException,
)

logger = logging.getLogger(__name__)


class Store:
    """
    Open handle on the TechMart database.

    Foreign keys are NOT enforced while the store bootstraps, so tables can be
    reconciled and the catalog replaced in any order. enable_foreign_keys()
    switches every later connection to enforcement.
    """

    def __init__(self, engine: AsyncEngine, location: str):
        self.engine = engine
        self.location = location
        self.session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        self.foreign_keys_enforced = False
        event.listen(engine.sync_engine, "connect", self._set_sqlite_pragma)

    def _set_sqlite_pragma(self, dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        if self.foreign_keys_enforced:
            cursor.execute("PRAGMA foreign_keys=ON")
        else:
            cursor.execute("PRAGMA foreign_keys=OFF")
        cursor.close()

    @asynccontextmanager
    async def session(self) -> AsyncSession:
        async with self.session_maker() as session:
            yield session

    async def enable_foreign_keys(self) -> None:
        self.foreign_keys_enforced = True
        # Pooled connections were opened with foreign_keys=OFF, drop them
        await self.engine.dispose()
        logger.info("Foreign key enforcement enabled")

    async def dispose(self) -> None:
        await self.engine.dispose()


async def open_store(db_config: DatabaseConfig) -> Store:
    """
    Open the database described by db_config.

    The SQLite file is created if it does not exist yet. A first connection is
    made eagerly so that an unreachable store fails here and not on the first
    query.

    Raises:
        DatabaseConnectionException: If the store cannot be opened
    """
    engine = create_async_engine(db_config.url, echo=config.SQL_ECHO)
    store = Store(engine, db_config.location)
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        await engine.dispose()
        raise DatabaseConnectionException(db_config.location, str(e))

    logger.info(f"Connected to {db_config.db_type.value} database {db_config.location}")
    return store


# Process-wide store, published once by bootstrap.init_db()
_store: Store | None = None


def publish_store(store: Store) -> None:
    global _store
    if _store is not None:
        raise StoreAlreadyInitializedException()
    _store = store


def get_store() -> Store:
    if _store is None:
        raise StoreNotInitializedException()
    return _store


@asynccontextmanager
async def get_db_session() -> AsyncSession:
    async with get_store().session() as session:
        yield session


async def session_execute(stmt, session: AsyncSession | Session) -> Result[Any] | CursorResult[Any]:
    if isinstance(session, AsyncSession):
        query_result = await session.execute(stmt)
        return query_result
    else:
        query_result = session.execute(stmt)
        return query_result


async def session_flush(session: AsyncSession | Session) -> None:
    if isinstance(session, AsyncSession):
        await session.flush()
    else:
        session.flush()


async def session_commit(session: AsyncSession | Session) -> None:
    if isinstance(session, AsyncSession):
        await session.commit()
    else:
        session.commit()


async def session_rollback(session: AsyncSession | Session) -> None:
    if isinstance(session, AsyncSession):
        await session.rollback()
    else:
        session.rollback()
