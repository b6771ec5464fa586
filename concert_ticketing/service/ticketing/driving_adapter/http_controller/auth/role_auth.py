from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from opentelemetry import trace

from concert_ticketing.platform.config.di import Container
from concert_ticketing.platform.exception.exceptions import AuthenticationError, ForbiddenError
from concert_ticketing.platform.metrics.ticketing_metrics import metrics
from concert_ticketing.service.ticketing.domain.entity.principal import Principal
from concert_ticketing.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import (
    JwtAuth,
)


bearer_scheme = HTTPBearer(auto_error=False)


def require_admin(principal: Principal) -> Principal:
    if not principal.is_admin:
        raise ForbiddenError('Admin privileges required')
    return principal


@inject
async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> Principal:
    """Verify the bearer token (stateless, no DB query)"""
    try:
        return jwt_auth.verify(credentials.credentials if credentials else None)
    except AuthenticationError:
        metrics.record_auth_failure(reason='unauthorized')
        raise


async def get_admin_principal(
    principal: Principal = Depends(get_current_principal),
) -> Principal:
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(
        'auth.require_admin',
        attributes={
            'user.id': str(principal.user_id),
            'user.is_admin': principal.is_admin,
        },
    ):
        try:
            return require_admin(principal)
        except ForbiddenError:
            metrics.record_auth_failure(reason='forbidden')
            raise
