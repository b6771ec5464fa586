from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from concert_ticketing.platform.config.di import Container
from concert_ticketing.platform.logging.loguru_io import Logger
from concert_ticketing.service.ticketing.app.command.register_user_use_case import (
    RegisterUserUseCase,
)
from concert_ticketing.service.ticketing.app.query.user_query_use_case import UserQueryUseCase
from concert_ticketing.service.ticketing.domain.entity.principal import Principal
from concert_ticketing.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import (
    JwtAuth,
)
from concert_ticketing.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    get_current_principal,
)
from concert_ticketing.service.ticketing.driving_adapter.http_controller.schema.user_schema import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserResponse,
)


router = APIRouter()


@router.post('/register', response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def register(
    request: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(RegisterUserUseCase.depends),
) -> UserResponse:
    user_entity = await use_case.register(email=request.email, password=request.password)
    return UserResponse(id=user_entity.id, email=user_entity.email, is_admin=user_entity.is_admin)


@router.post('/login', response_model=LoginResponse)
@Logger.io
@inject
async def login(
    request: LoginRequest,
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> LoginResponse:
    user_entity = await use_case.authenticate(email=request.email, password=request.password)
    return LoginResponse(token=jwt_auth.issue(user_entity), is_admin=user_entity.is_admin)


@router.get('/me', response_model=UserResponse)
@Logger.io
async def get_me(
    principal: Principal = Depends(get_current_principal),
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> UserResponse:
    user_entity = await use_case.get_current_user(principal=principal)
    return UserResponse(id=user_entity.id, email=user_entity.email, is_admin=user_entity.is_admin)
