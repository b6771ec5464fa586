"""
Test Configuration and Fixtures

This module provides:
- Environment bootstrap (SQLite database file, signing secret, log directory)
- The session-scoped TestClient running the real app against SQLite
- Helpers for registering users and minting bearer tokens

Architecture:
- Unit tests (test/**/unit/): in-memory fakes, no database, no HTTP
- Integration tests: real SQLAlchemy adapters on SQLite (aiosqlite) and the HTTP app
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# settings are read once, at import time of concert_ticketing modules
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    test_db_dir = Path(tempfile.mkdtemp(prefix='concert_ticketing_test_'))
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{test_db_dir / "test.db"}'
    os.environ['DB_CREATE_TABLES_ON_STARTUP'] = 'true'
    os.environ['SECRET_KEY'] = 'test_secret_key_for_pytest_only_do_not_use'
    os.environ['ACCESS_TOKEN_EXPIRE_DAYS'] = '7'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402
from uuid import uuid4  # noqa: E402

from dotenv import load_dotenv  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from concert_ticketing.platform.constant.route_constant import (  # noqa: E402
    AUTH_LOGIN,
    AUTH_REGISTER,
    CONCERT_BASE,
    TICKET_BASE,
)
from concert_ticketing.service.ticketing.domain.entity.user_entity import UserEntity  # noqa: E402
from concert_ticketing.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import (  # noqa: E402
    JwtAuth,
)


# Values already exported above win over anything in a local .env
load_dotenv(override=False)

DEFAULT_PASSWORD = 'P@ssw0rd123'


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from concert_ticketing.main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(scope='session')
def jwt_auth() -> JwtAuth:
    return JwtAuth()


# =============================================================================
# Helpers
# =============================================================================
def unique_email(prefix: str = 'user') -> str:
    return f'{prefix}_{uuid4().hex[:12]}@example.com'


def bearer(token: str) -> dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def register_user(client: TestClient) -> Callable[..., dict[str, Any]]:
    """Register a fresh user and log in; returns the user with its token"""

    def _register(email: str | None = None, password: str = DEFAULT_PASSWORD) -> dict[str, Any]:
        email = email or unique_email()
        response = client.post(AUTH_REGISTER, json={'email': email, 'password': password})
        assert response.status_code == 201, response.text
        user = response.json()

        login_response = client.post(AUTH_LOGIN, json={'email': email, 'password': password})
        assert login_response.status_code == 200, login_response.text
        user['token'] = login_response.json()['token']
        user['headers'] = bearer(user['token'])
        return user

    return _register


@pytest.fixture
def admin_headers(jwt_auth: JwtAuth) -> dict[str, str]:
    # Tokens are verified statelessly, so an admin token needs no stored user
    admin = UserEntity(email=unique_email('admin'), is_admin=True)
    return bearer(jwt_auth.issue(admin))


@pytest.fixture
def create_ticket_class(
    client: TestClient, admin_headers: dict[str, str]
) -> Callable[..., dict[str, Any]]:
    """Publish a concert with one ticket class through the admin API"""

    def _create(
        stock: int = 10,
        price: float = 1500.0,
        ticket_type: str = 'General',
        concert: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        if concert is None:
            concert_response = client.post(
                CONCERT_BASE,
                json={'title': 'Test Concert', 'date': '2026-12-24T19:30:00', 'venue': 'Arena'},
                headers=admin_headers,
            )
            assert concert_response.status_code == 201, concert_response.text
            concert = concert_response.json()

        ticket_response = client.post(
            TICKET_BASE,
            json={
                'concert_id': concert['id'],
                'ticket_type': ticket_type,
                'price': price,
                'stock': stock,
            },
            headers=admin_headers,
        )
        assert ticket_response.status_code == 201, ticket_response.text
        ticket = ticket_response.json()
        ticket['concert'] = concert
        return ticket

    return _create


@pytest.fixture
def get_stock(client: TestClient) -> Callable[[dict[str, Any]], int]:
    def _get_stock(ticket: dict[str, Any]) -> int:
        response = client.get(TICKET_BASE, params={'concert_id': ticket['concert_id']})
        assert response.status_code == 200, response.text
        return next(t['stock'] for t in response.json() if t['id'] == ticket['id'])

    return _get_stock
