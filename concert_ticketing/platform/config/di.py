"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from concert_ticketing.platform.database.orm_db_setting import Database
from concert_ticketing.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from concert_ticketing.service.ticketing.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from concert_ticketing.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import (
    JwtAuth,
)


class Container(containers.DeclarativeContainer):
    # Database (AsyncEngineManager reads the pool settings)
    database = providers.Singleton(Database)

    # One unit of work (one session, one transaction) per request
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork,
        session_factory=database.provided.session,
    )

    # Stateless services, constructed once
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()
