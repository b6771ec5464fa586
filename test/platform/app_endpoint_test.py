from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from concert_ticketing.platform.constant.route_constant import HEALTH, METRICS
from concert_ticketing.platform.exception.exception_handlers import register_exception_handlers
from concert_ticketing.platform.exception.exceptions import ConflictError


@pytest.fixture
def failing_app_client():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get('/pool-exhausted')
    async def pool_exhausted():
        raise PoolTimeoutError('QueuePool limit of size 10 overflow 0 reached')

    @app.get('/database-down')
    async def database_down():
        raise OperationalError('SELECT 1', {}, Exception('connection refused'))

    @app.get('/conflict')
    async def conflict():
        raise ConflictError('Email already registered')

    @app.get('/boom')
    async def boom():
        raise RuntimeError('unexpected')

    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.mark.unit
class TestErrorRendering:
    @pytest.mark.parametrize('path', ['/pool-exhausted', '/database-down', '/boom'])
    def test_storage_and_unexpected_errors_hide_details(self, failing_app_client, path):
        response = failing_app_client.get(path)

        assert response.status_code == 500
        assert response.json() == {'error': 'Internal server error'}

    def test_domain_error_keeps_status_and_message(self, failing_app_client):
        response = failing_app_client.get('/conflict')

        assert response.status_code == 409
        assert response.json() == {'error': 'Email already registered'}

    def test_unknown_route_uses_error_body(self, failing_app_client):
        response = failing_app_client.get('/nowhere')

        assert response.status_code == 404
        assert 'error' in response.json()


@pytest.mark.integration
class TestOperationalEndpoints:
    def test_health(self, client: TestClient):
        response = client.get(HEALTH)

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_metrics_expose_order_counters(self, client: TestClient):
        response = client.get(METRICS)

        assert response.status_code == 200
        assert 'order_requests_total' in response.text
        assert 'auth_failures_total' in response.text
