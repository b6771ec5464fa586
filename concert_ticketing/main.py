"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
import uvicorn

from concert_ticketing.platform.app_factory import create_app
from concert_ticketing.platform.config.core_setting import settings
from concert_ticketing.platform.config.di import container
from concert_ticketing.platform.config.wire_modules import WIRE_MODULES
from concert_ticketing.platform.database.orm_db_setting import (
    create_db_and_tables,
    dispose_engine,
    get_engine,
)
from concert_ticketing.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('[Concert Ticketing] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('[Concert Ticketing] Dependency injection wired')

    get_engine()
    if settings.DB_CREATE_TABLES_ON_STARTUP:
        await create_db_and_tables()
        Logger.base.info('[Concert Ticketing] Database tables ensured')
    Logger.base.info('[Concert Ticketing] Database engine ready')

    yield

    Logger.base.info('[Concert Ticketing] Shutting down...')
    await dispose_engine()
    container.unwire()
    Logger.base.info('[Concert Ticketing] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/', include_in_schema=False)
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')


def run() -> None:
    uvicorn.run(
        'concert_ticketing.main:app',
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,  # stdlib logging is already routed into loguru
    )


if __name__ == '__main__':
    run()
