from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pydantic import SecretStr

from concert_ticketing.platform.config.di import Container
from concert_ticketing.platform.database.unit_of_work import AbstractUnitOfWork
from concert_ticketing.platform.exception.exceptions import ConflictError
from concert_ticketing.platform.logging.loguru_io import Logger
from concert_ticketing.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from concert_ticketing.service.ticketing.domain.entity.user_entity import (
    EMAIL_ALREADY_REGISTERED,
    UserEntity,
)


class RegisterUserUseCase:
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
    async def register(self, *, email: str, password: SecretStr) -> UserEntity:
        email = email.strip().lower()
        user_entity = UserEntity(email=email)
        user_entity.set_password(password, self.password_hasher)

        async with self.uow:
            if await self.uow.users.get_by_email(email=email):
                raise ConflictError(EMAIL_ALREADY_REGISTERED)
            # A concurrent registration still trips the unique index inside create()
            created = await self.uow.users.create(user_entity=user_entity)
            await self.uow.commit()

        return created
