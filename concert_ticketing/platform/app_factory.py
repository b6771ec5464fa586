"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from concert_ticketing.platform.config.core_setting import settings
from concert_ticketing.platform.constant.route_constant import (
    CONCERT_BASE,
    HEALTH,
    METRICS,
    ORDER_BASE,
    TICKET_BASE,
)
from concert_ticketing.platform.exception.exception_handlers import register_exception_handlers
from concert_ticketing.service.ticketing.driving_adapter.http_controller.concert_controller import (
    concert_router,
    ticket_router,
)
from concert_ticketing.service.ticketing.driving_adapter.http_controller.order_controller import (
    router as order_router,
)
from concert_ticketing.service.ticketing.driving_adapter.http_controller.user_controller import (
    router as auth_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Concert ticket ordering',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(auth_router, prefix='/auth', tags=['auth'])
    app.include_router(concert_router, prefix=CONCERT_BASE, tags=['concert'])
    app.include_router(ticket_router, prefix=TICKET_BASE, tags=['ticket'])
    app.include_router(order_router, prefix=ORDER_BASE, tags=['order'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register health and metrics endpoints."""

    @app.get(HEALTH)
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    @app.get(METRICS)
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
