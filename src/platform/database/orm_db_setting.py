"""
SQLAlchemy async engine and session management

AsyncEngineManager keeps one write engine (primary) and one read engine
(replica when POSTGRES_REPLICA_SERVER is set, otherwise the primary), and
rebuilds both when the running event loop changes so engines never get
bound to a dead loop (TestClient and pytest-asyncio each start their own).
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class AsyncEngineManager:
    def __init__(self) -> None:
        self._write_engine: Optional[AsyncEngine] = None
        self._read_engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._write_session_maker: Optional[async_sessionmaker[AsyncSession]] = None
        self._read_session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    def get_engine(self, *, read_only: bool = False) -> AsyncEngine:
        try:
            current_loop: Optional[asyncio.AbstractEventLoop] = asyncio.get_running_loop()
        except RuntimeError:
            current_loop = None

        if current_loop is not None and self._loop is not current_loop:
            if self._write_engine is not None or self._read_engine is not None:
                # dispose() needs the old loop; dropped engines are garbage collected
                Logger.base.warning('🔄 [DB] Event loop changed, dropping old engines')
            self._reset()
            self._loop = current_loop
            Logger.base.info(f'🔗 [DB] Creating engines for event loop {id(current_loop)}')

        if self._write_engine is None:
            self._write_engine = self._create_engine(
                url=settings.DATABASE_URL_ASYNC, pool_size=settings.DB_POOL_SIZE_WRITE
            )
        if self._read_engine is None:
            self._read_engine = self._create_engine(
                url=settings.DATABASE_READ_URL_ASYNC, pool_size=settings.DB_POOL_SIZE_READ
            )

        return self._read_engine if read_only else self._write_engine

    def get_session_maker(self, *, read_only: bool = False) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine(read_only=read_only)

        if read_only:
            if self._read_session_maker is None:
                self._read_session_maker = async_sessionmaker(
                    engine, class_=AsyncSession, expire_on_commit=False
                )
            return self._read_session_maker

        if self._write_session_maker is None:
            self._write_session_maker = async_sessionmaker(
                engine, class_=AsyncSession, expire_on_commit=False
            )
        return self._write_session_maker

    async def dispose(self) -> None:
        for engine in {self._write_engine, self._read_engine}:
            if engine is not None:
                await engine.dispose()
        self._reset()

    def _reset(self) -> None:
        self._write_engine = None
        self._read_engine = None
        self._write_session_maker = None
        self._read_session_maker = None
        self._loop = None

    @staticmethod
    def _create_engine(*, url: str, pool_size: int) -> AsyncEngine:
        return create_async_engine(
            url,
            echo=False,
            pool_size=pool_size,
            max_overflow=settings.DB_POOL_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=settings.DB_POOL_PRE_PING,
        )


_engine_manager = AsyncEngineManager()


def get_engine(*, read_only: bool = False) -> AsyncEngine:
    return _engine_manager.get_engine(read_only=read_only)


def get_session_maker(*, read_only: bool = False) -> async_sessionmaker[AsyncSession]:
    return _engine_manager.get_session_maker(read_only=read_only)


async def dispose_engines() -> None:
    await _engine_manager.dispose()


class Base(DeclarativeBase):
    pass


class Database:
    """
    Session provider injected into repositories as `session_factory`

    Usage:
        async with database.session() as session:
            ...
    """

    def __init__(self, *, read_only: bool = False) -> None:
        self._read_only = read_only

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        # The session context manager rolls back uncommitted work on exit
        session_maker = get_session_maker(read_only=self._read_only)
        async with session_maker() as session:
            yield session
