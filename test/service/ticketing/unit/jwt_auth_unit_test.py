from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
import pytest

from concert_ticketing.platform.exception.exceptions import AuthenticationError, ForbiddenError
from concert_ticketing.service.ticketing.domain.entity.principal import Principal
from concert_ticketing.service.ticketing.domain.entity.user_entity import UserEntity
from concert_ticketing.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import (
    JwtAuth,
)
from concert_ticketing.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    require_admin,
)


SECRET = 'unit-test-secret-at-least-32-bytes-long'


@pytest.fixture
def jwt_auth() -> JwtAuth:
    return JwtAuth(secret=SECRET, algorithm='HS256', token_expire_days=7)


@pytest.fixture
def user() -> UserEntity:
    return UserEntity(email='a@b.com', password_hash='hashed', is_admin=False)


@pytest.mark.unit
class TestJwtAuth:
    def test_issued_token_carries_subject_admin_flag_and_seven_day_expiry(self, jwt_auth, user):
        # Arrange
        now = datetime(2026, 1, 1, tzinfo=timezone.utc)

        # Act
        token = jwt_auth.issue(user, now=now)
        claims = jwt.decode(
            token, SECRET, algorithms=['HS256'], options={'verify_exp': False}
        )

        # Assert
        assert claims['sub'] == str(user.id)
        assert claims['admin'] is False
        assert claims['exp'] == int((now + timedelta(days=7)).timestamp())

    def test_verify_returns_principal(self, jwt_auth, user):
        user.is_admin = True

        principal = jwt_auth.verify(jwt_auth.issue(user))

        assert principal == Principal(user_id=user.id, is_admin=True)

    def test_expired_token_is_rejected(self, jwt_auth, user):
        issued_long_ago = datetime.now(timezone.utc) - timedelta(days=8)
        token = jwt_auth.issue(user, now=issued_long_ago)

        with pytest.raises(AuthenticationError) as exc_info:
            jwt_auth.verify(token)

        assert exc_info.value.status_code == 401

    @pytest.mark.parametrize('token', [None, '', 'not-a-jwt', 'a.b.c'])
    def test_missing_or_malformed_token_is_rejected(self, jwt_auth, token):
        with pytest.raises(AuthenticationError):
            jwt_auth.verify(token)

    def test_token_signed_with_another_secret_is_rejected(self, jwt_auth, user):
        forged = JwtAuth(
            secret='another-secret-at-least-32-bytes-long', algorithm='HS256', token_expire_days=7
        ).issue(user)

        with pytest.raises(AuthenticationError):
            jwt_auth.verify(forged)

    def test_token_without_admin_claim_is_rejected(self, jwt_auth, user):
        token = jwt.encode(
            {'sub': str(user.id), 'exp': datetime.now(timezone.utc) + timedelta(hours=1)},
            SECRET,
            algorithm='HS256',
        )

        with pytest.raises(AuthenticationError):
            jwt_auth.verify(token)

    def test_token_with_non_uuid_subject_is_rejected(self, jwt_auth):
        token = jwt.encode(
            {
                'sub': '42',
                'admin': False,
                'exp': datetime.now(timezone.utc) + timedelta(hours=1),
            },
            SECRET,
            algorithm='HS256',
        )

        with pytest.raises(AuthenticationError):
            jwt_auth.verify(token)


@pytest.mark.unit
class TestRequireAdmin:
    def test_admin_passes(self):
        principal = Principal(user_id=UUID(int=1), is_admin=True)

        assert require_admin(principal) is principal

    def test_non_admin_is_forbidden(self):
        with pytest.raises(ForbiddenError) as exc_info:
            require_admin(Principal(user_id=UUID(int=1), is_admin=False))

        assert exc_info.value.status_code == 403
