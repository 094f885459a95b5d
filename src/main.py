"""
Production FastAPI Application

Single process: HTTP API plus in-memory SSE fan-out.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import dispose_engines, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [StageLink] Starting up...')

    tracing = TracingConfig(service_name='stagelink-service')
    tracing.setup()
    Logger.base.info('📊 [StageLink] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [StageLink] Dependency injection wired')

    tracing.instrument_sqlalchemy(engine=get_engine())
    Logger.base.info('🗄️  [StageLink] Database engine ready + instrumented')

    Logger.base.info('✅ [StageLink] Ready to serve requests')

    yield

    Logger.base.info('🛑 [StageLink] Shutting down...')

    await dispose_engines()
    Logger.base.info('🗄️  [StageLink] Database engines disposed')

    tracing.shutdown()
    Logger.base.info('📊 [StageLink] Tracing shutdown complete')

    container.unwire()

    Logger.base.info('👋 [StageLink] Shutdown complete')


app = create_app(
    lifespan=lifespan,
    description='StageLink - artists, venue owners and audience on one marketplace',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
