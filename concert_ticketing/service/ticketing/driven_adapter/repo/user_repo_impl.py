from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from concert_ticketing.platform.exception.exceptions import ConflictError
from concert_ticketing.platform.logging.loguru_io import Logger
from concert_ticketing.service.ticketing.app.interface.i_user_repo import IUserRepo
from concert_ticketing.service.ticketing.domain.entity.user_entity import (
    EMAIL_ALREADY_REGISTERED,
    UserEntity,
)
from concert_ticketing.service.ticketing.driven_adapter.model.user_model import UserModel


class UserRepoImpl(IUserRepo):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @Logger.io
    async def create(self, *, user_entity: UserEntity) -> UserEntity:
        user_model = UserModel(
            id=user_entity.id,
            email=user_entity.email,
            password_hash=user_entity.password_hash,
            is_admin=user_entity.is_admin,
        )
        self.session.add(user_model)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise ConflictError(EMAIL_ALREADY_REGISTERED) from e

        return self._model_to_entity(user_model)

    @Logger.io
    async def get_by_id(self, *, user_id: UUID) -> Optional[UserEntity]:
        result = await self.session.execute(select(UserModel).where(UserModel.id == user_id))
        user_model = result.scalar_one_or_none()
        return self._model_to_entity(user_model) if user_model else None

    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[UserEntity]:
        result = await self.session.execute(select(UserModel).where(UserModel.email == email))
        user_model = result.scalar_one_or_none()
        return self._model_to_entity(user_model) if user_model else None

    @staticmethod
    def _model_to_entity(user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            email=user_model.email,
            password_hash=user_model.password_hash,
            is_admin=user_model.is_admin,
            created_at=user_model.created_at,
        )
