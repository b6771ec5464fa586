from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from concert_ticketing.service.ticketing.domain.entity.user_entity import UserEntity


class IUserRepo(ABC):
    """User Repository Abstract Interface"""

    @abstractmethod
    async def create(self, *, user_entity: UserEntity) -> UserEntity:
        """Insert a user; raises ConflictError when the email is already registered"""
        pass

    @abstractmethod
    async def get_by_id(self, *, user_id: UUID) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def get_by_email(self, *, email: str) -> Optional[UserEntity]:
        pass
