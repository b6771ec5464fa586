"""
Fixtures for repository-level integration tests

Each test gets its own SQLite file so concurrent transactions contend on real
database locks, without sharing rows with the HTTP tests.
"""

from collections.abc import AsyncGenerator, Callable
from datetime import datetime

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from concert_ticketing.platform.database.orm_db_setting import create_db_and_tables
from concert_ticketing.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from concert_ticketing.service.ticketing.domain.entity.concert_entity import ConcertEntity
from concert_ticketing.service.ticketing.domain.entity.principal import Principal
from concert_ticketing.service.ticketing.domain.entity.ticket_entity import TicketClassEntity
from concert_ticketing.service.ticketing.domain.entity.user_entity import UserEntity


@pytest.fixture
async def sqlite_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(f'sqlite+aiosqlite:///{tmp_path / "orders.db"}')
    await create_db_and_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def uow_factory(sqlite_engine: AsyncEngine) -> Callable[[], SqlAlchemyUnitOfWork]:
    session_maker = async_sessionmaker(sqlite_engine, expire_on_commit=False)
    return lambda: SqlAlchemyUnitOfWork(session_factory=session_maker)


@pytest.fixture
def seed_ticket_class(uow_factory):
    async def _seed(
        stock: int,
        *,
        price: float = 1500.0,
        ticket_type: str = 'General',
        concert: ConcertEntity | None = None,
    ) -> TicketClassEntity:
        async with uow_factory() as uow:
            if concert is None:
                concert = await uow.concerts.create_concert(
                    concert=ConcertEntity.create(
                        title='Integration Concert',
                        date=datetime(2026, 12, 24, 19, 30),
                        venue='Dome',
                    )
                )
            ticket_class = await uow.concerts.create_ticket_class(
                ticket_class=TicketClassEntity.create(
                    concert_id=concert.id, ticket_type=ticket_type, price=price, stock=stock
                )
            )
            await uow.commit()
        return ticket_class

    return _seed


@pytest.fixture
def seed_buyer(uow_factory):
    async def _seed(email: str) -> Principal:
        async with uow_factory() as uow:
            user = await uow.users.create(
                user_entity=UserEntity(email=email, password_hash='not-a-real-hash')
            )
            await uow.commit()
        return Principal(user_id=user.id)

    return _seed
