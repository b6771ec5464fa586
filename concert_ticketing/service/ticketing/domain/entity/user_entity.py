from datetime import datetime
from typing import Optional
from uuid import UUID

import attrs
from pydantic import SecretStr
from uuid_utils.compat import uuid7

from concert_ticketing.platform.exception.exceptions import AuthenticationError


INVALID_CREDENTIALS = 'Invalid email or password'
EMAIL_ALREADY_REGISTERED = 'Email already registered'


@attrs.define
class UserEntity:
    email: str
    password_hash: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: UUID = attrs.field(factory=uuid7)
    is_admin: bool = False
    created_at: Optional[datetime] = None

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise AuthenticationError(INVALID_CREDENTIALS)
        return user_entity

    def set_password(self, plain_password: SecretStr, password_hasher) -> None:
        """Set password using provided password hasher"""
        from concert_ticketing.service.ticketing.app.interface.i_password_hasher import (
            IPasswordHasher,
        )

        if not isinstance(password_hasher, IPasswordHasher):
            raise TypeError('password_hasher must implement IPasswordHasher interface')

        self.password_hash = password_hasher.hash_password(plain_password=plain_password)
