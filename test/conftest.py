"""
Test Configuration and Fixtures

This module provides:
- Test database selection (set before any application import reads settings)
- Migration of the test database for integration tests, skipped when
  PostgreSQL is unreachable
- Table cleanup and raw SQL helpers for integration tests

Architecture:
- Unit tests (test/**/unit/): mocks only, never touch the database
- Integration tests (marked `integration`): real PostgreSQL via alembic
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read once at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    if worker_id == 'master':
        os.environ['POSTGRES_DB'] = 'stagelink_test_db'
    else:
        os.environ['POSTGRES_DB'] = f'stagelink_test_db_{worker_id}'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('DB_POOL_SIZE_WRITE', '10')
    os.environ.setdefault('DB_POOL_SIZE_READ', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '10')
    os.environ.setdefault('ADMIN_TOKEN', 'test_admin_token')


_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import AsyncGenerator, Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import text  # noqa: E402
from sqlalchemy.exc import SQLAlchemyError  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from src.platform.config.core_setting import settings  # noqa: E402
from src.platform.constant.path import ALEMBIC_INI  # noqa: E402
from src.platform.database.orm_db_setting import dispose_engines  # noqa: E402


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
def _admin_database_url() -> str:
    return settings.DATABASE_URL_ASYNC.replace(f'/{settings.POSTGRES_DB}', '/postgres')


async def _create_test_database() -> None:
    engine = create_async_engine(_admin_database_url(), isolation_level='AUTOCOMMIT')
    try:
        async with engine.begin() as conn:
            result = await conn.execute(
                text('SELECT 1 FROM pg_database WHERE datname = :name'),
                {'name': settings.POSTGRES_DB},
            )
            if not result.fetchone():
                await conn.execute(text(f'CREATE DATABASE {settings.POSTGRES_DB}'))
    finally:
        await engine.dispose()

    reset_engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with reset_engine.begin() as conn:
            await conn.execute(text('DROP SCHEMA public CASCADE'))
            await conn.execute(text('CREATE SCHEMA public'))
    finally:
        await reset_engine.dispose()


async def _clean_all_tables() -> None:
    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with engine.begin() as conn:
            result = await conn.execute(
                text(
                    "SELECT tablename FROM pg_tables WHERE schemaname = 'public' "
                    "AND tablename != 'alembic_version'"
                )
            )
            tables = [f'"{row[0]}"' for row in result]
            if tables:
                await conn.execute(text(f'TRUNCATE {", ".join(tables)} RESTART IDENTITY CASCADE'))
    finally:
        await engine.dispose()


@pytest.fixture(scope='session')
def migrated_database() -> None:
    """Fresh schema at alembic head; skips the requesting test without PostgreSQL"""
    try:
        asyncio.run(_create_test_database())
    except (OSError, SQLAlchemyError) as e:
        pytest.skip(f'PostgreSQL is not reachable: {e}')

    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option('sqlalchemy.url', settings.DATABASE_URL_ASYNC)
    command.upgrade(alembic_cfg, 'head')


@pytest.fixture(scope='function')
async def clean_database(migrated_database: None) -> AsyncGenerator[None, None]:
    await _clean_all_tables()
    yield
    # Engines are bound to this test's event loop
    await dispose_engines()


@pytest.fixture
def execute_sql_statement() -> Callable[..., Any]:
    async def _execute(
        statement: str, params: dict[str, Any] | None = None, fetch: bool = False
    ) -> list[dict[str, Any]] | None:
        engine = create_async_engine(settings.DATABASE_URL_ASYNC)
        try:
            async with engine.begin() as conn:
                result = await conn.execute(text(statement), params or {})
                if fetch:
                    return [dict(row._mapping) for row in result]
                return None
        finally:
            await engine.dispose()

    return _execute


# =============================================================================
# HTTP client
# =============================================================================
@pytest.fixture
def client() -> Generator[Any, None, None]:
    """TestClient over the test app; tests override use-case dependencies"""
    from fastapi.testclient import TestClient

    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
