"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: one engine per running event loop, bounded connection pool
2. Base: declarative base shared by every ORM model
3. Database: session factory handed to units of work through DI

Pool behaviour:
- DB_POOL_SIZE connections, DB_POOL_MAX_OVERFLOW extra
- Checking out a connection waits at most DB_POOL_TIMEOUT seconds, then raises
  sqlalchemy.exc.TimeoutError (surfaced to clients as a 500)
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from concert_ticketing.platform.config.core_setting import settings
from concert_ticketing.platform.logging.loguru_io import Logger


# =============================================================================
# Event-loop-aware Engine Manager
# =============================================================================


def build_engine_kwargs(database_url: str) -> dict[str, Any]:
    url = make_url(database_url)
    # In-memory SQLite runs on a static single-connection pool
    if url.get_backend_name() == 'sqlite' and url.database in (None, '', ':memory:'):
        return {}
    return {
        'pool_size': settings.DB_POOL_SIZE,
        'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
        'pool_timeout': settings.DB_POOL_TIMEOUT,
        'pool_recycle': settings.DB_POOL_RECYCLE,
        'pool_pre_ping': settings.DB_POOL_PRE_PING,
    }


class AsyncEngineManager:
    """
    Manages the SQLAlchemy async engine with event loop awareness.

    asyncpg connections are bound to the loop that opened them, so the engine is
    recreated whenever it is used from a different loop (e.g. TestClient's portal
    thread versus the pytest loop) to prevent
    "Task got Future attached to a different loop" errors.
    """

    def __init__(self):
        self._engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop running, create engine without loop tracking
            if self._engine is None:
                self._engine = self._create_engine()
            return self._engine

        if self._loop is not current_loop:
            if self._engine is not None:
                Logger.base.warning('[DB] Event loop changed, dropping old engine')
                self._session_maker = None

            Logger.base.info(f'[DB] Creating engine for event loop {id(current_loop)}')
            self._engine = self._create_engine()
            self._loop = current_loop

        return self._engine  # type: ignore[return-value]

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine()
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        self._loop = None

    def _create_engine(self) -> AsyncEngine:
        database_url = settings.DATABASE_URL_ASYNC
        return create_async_engine(database_url, echo=False, **build_engine_kwargs(database_url))


# Global engine manager
_engine_manager = AsyncEngineManager()


def get_engine() -> AsyncEngine:
    return _engine_manager.get_engine()


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return _engine_manager.get_session_maker()


async def dispose_engine() -> None:
    await _engine_manager.dispose()


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


# =============================================================================
# Table Creation
# =============================================================================


async def create_db_and_tables(engine: Optional[AsyncEngine] = None) -> None:
    """Create database tables if they don't exist (local runs and tests; prod uses alembic)"""
    # Register every model on Base.metadata
    from concert_ticketing.service.ticketing.driven_adapter.model import (  # noqa: F401
        concert_model,
        order_model,
        ticket_model,
        user_model,
    )

    current_engine = engine or get_engine()
    async with current_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)


# =============================================================================
# Database Class (session factory for DI)
# =============================================================================


class Database:
    """
    Session factory for the dependency injection container

    Delegates to AsyncEngineManager for event-loop-aware engine management.
    """

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for database sessions

        Note: AsyncSession's own context manager rolls back anything
        uncommitted and returns the connection to the pool on exit
        """
        session_maker = get_session_maker()
        async with session_maker() as session:
            yield session
