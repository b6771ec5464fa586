from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pydantic import SecretStr

from concert_ticketing.platform.config.di import Container
from concert_ticketing.platform.database.unit_of_work import AbstractUnitOfWork
from concert_ticketing.platform.exception.exceptions import AuthenticationError
from concert_ticketing.platform.logging.loguru_io import Logger
from concert_ticketing.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from concert_ticketing.service.ticketing.domain.entity.principal import Principal
from concert_ticketing.service.ticketing.domain.entity.user_entity import (
    INVALID_CREDENTIALS,
    UserEntity,
)


class UserQueryUseCase:
    """Login credential check and session enrichment of a verified principal"""

    def __init__(self, *, uow: AbstractUnitOfWork, password_hasher: IPasswordHasher) -> None:
        self.uow = uow
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(uow=uow, password_hasher=password_hasher)

    @Logger.io
    async def authenticate(self, *, email: str, password: SecretStr) -> UserEntity:
        async with self.uow:
            user_entity = await self.uow.users.get_by_email(email=email.strip().lower())

        user_entity = UserEntity.validate_user_exists(user_entity)
        if not self.password_hasher.verify_password(
            plain_password=password, hashed_password=user_entity.password_hash
        ):
            raise AuthenticationError(INVALID_CREDENTIALS)

        return user_entity

    @Logger.io
    async def get_current_user(self, *, principal: Principal) -> UserEntity:
        async with self.uow:
            user_entity = await self.uow.users.get_by_id(user_id=principal.user_id)

        if not user_entity:
            raise AuthenticationError('User not found')

        return user_entity
