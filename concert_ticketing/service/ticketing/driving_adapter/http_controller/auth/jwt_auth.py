"""
Identity tokens

Stateless HS256 tokens carrying `{sub, admin, exp}`. Expiry is the only way a
token stops being valid; there is no revocation list and no store lookup.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

import jwt

from concert_ticketing.platform.config.core_setting import settings
from concert_ticketing.platform.exception.exceptions import AuthenticationError
from concert_ticketing.service.ticketing.domain.entity.principal import Principal
from concert_ticketing.service.ticketing.domain.entity.user_entity import UserEntity


INVALID_TOKEN = 'Invalid or expired token'


class JwtAuth:
    def __init__(
        self,
        *,
        secret: Optional[str] = None,
        algorithm: Optional[str] = None,
        token_expire_days: Optional[int] = None,
    ) -> None:
        self.secret = secret or settings.SECRET_KEY.get_secret_value()
        self.algorithm = algorithm or settings.ALGORITHM
        self.token_expire_days = token_expire_days or settings.ACCESS_TOKEN_EXPIRE_DAYS

    def issue(self, user_entity: UserEntity, *, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            'sub': str(user_entity.id),
            'admin': user_entity.is_admin,
            'exp': issued_at + timedelta(days=self.token_expire_days),
            'iat': issued_at,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={'require': ['sub', 'exp']},
            )
        except jwt.PyJWTError as e:
            raise AuthenticationError(INVALID_TOKEN) from e

    def verify(self, token: Optional[str]) -> Principal:
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode(token)
        is_admin = payload.get('admin')
        if not isinstance(is_admin, bool):
            raise AuthenticationError(INVALID_TOKEN)
        try:
            user_id = UUID(str(payload['sub']))
        except ValueError as e:
            raise AuthenticationError(INVALID_TOKEN) from e

        return Principal(user_id=user_id, is_admin=is_admin)
