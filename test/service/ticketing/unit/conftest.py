"""
In-memory fakes of the order placement ports.

InMemoryTicketingState is the shared "database": stock counters, orders and
users. Each InMemoryUnitOfWork keeps an undo log so that leaving the block
without commit() restores every change it made, like a rolled back transaction.
"""

import asyncio
from typing import Any, Callable, List, Optional
from uuid import UUID

import pytest
from uuid_utils.compat import uuid7

from concert_ticketing.platform.database.unit_of_work import AbstractUnitOfWork
from concert_ticketing.platform.exception.exceptions import ConflictError
from concert_ticketing.service.ticketing.app.interface.i_concert_repo import IConcertRepo
from concert_ticketing.service.ticketing.app.interface.i_inventory_store import IInventoryStore
from concert_ticketing.service.ticketing.app.interface.i_order_ledger import IOrderLedger
from concert_ticketing.service.ticketing.app.interface.i_user_repo import IUserRepo
from concert_ticketing.service.ticketing.domain.entity.concert_entity import ConcertEntity
from concert_ticketing.service.ticketing.domain.entity.order_entity import (
    ConsumeResult,
    OrderEntity,
    OrderListQuery,
    OrderView,
)
from concert_ticketing.service.ticketing.domain.entity.principal import Principal
from concert_ticketing.service.ticketing.domain.entity.ticket_entity import TicketClassEntity
from concert_ticketing.service.ticketing.domain.entity.user_entity import (
    EMAIL_ALREADY_REGISTERED,
    UserEntity,
)


class InMemoryTicketingState:
    def __init__(self) -> None:
        self.stock: dict[UUID, int] = {}
        self.initial_stock: dict[UUID, int] = {}
        self.orders: list[OrderEntity] = []
        self.users: dict[UUID, UserEntity] = {}
        self.concerts: dict[UUID, ConcertEntity] = {}
        self.ticket_classes: dict[UUID, TicketClassEntity] = {}
        self.lock = asyncio.Lock()

    def add_ticket(self, stock: int) -> UUID:
        ticket_id = uuid7()
        self.stock[ticket_id] = stock
        self.initial_stock[ticket_id] = stock
        return ticket_id

    def sold(self, ticket_id: UUID) -> int:
        return sum(order.quantity for order in self.orders if order.ticket_id == ticket_id)


class InMemoryInventoryStore(IInventoryStore):
    def __init__(self, state: InMemoryTicketingState, undo_log: list[Callable[[], None]]) -> None:
        self.state = state
        self.undo_log = undo_log

    async def get_stock(self, *, ticket_id: UUID) -> Optional[int]:
        await asyncio.sleep(0)
        return self.state.stock.get(ticket_id)

    async def try_consume(self, *, ticket_id: UUID, quantity: int) -> ConsumeResult:
        # Yield first so concurrent callers interleave before the conditional update
        await asyncio.sleep(0)
        async with self.state.lock:
            current = self.state.stock.get(ticket_id)
            if current is None:
                return ConsumeResult.NOT_FOUND
            if current < quantity:
                return ConsumeResult.INSUFFICIENT_STOCK
            self.state.stock[ticket_id] = current - quantity

        def _undo() -> None:
            self.state.stock[ticket_id] += quantity

        self.undo_log.append(_undo)
        return ConsumeResult.OK


class InMemoryOrderLedger(IOrderLedger):
    def __init__(
        self,
        state: InMemoryTicketingState,
        undo_log: list[Callable[[], None]],
        *,
        fail_on_record: bool = False,
    ) -> None:
        self.state = state
        self.undo_log = undo_log
        self.fail_on_record = fail_on_record

    async def record(self, *, buyer_id: UUID, ticket_id: UUID, quantity: int) -> OrderEntity:
        await asyncio.sleep(0)
        if self.fail_on_record:
            raise ConnectionError('connection lost while inserting order')
        order = OrderEntity(buyer_id=buyer_id, ticket_id=ticket_id, quantity=quantity)
        self.state.orders.append(order)
        self.undo_log.append(lambda: self.state.orders.remove(order))
        return order

    def _view(self, order: OrderEntity) -> OrderView:
        return OrderView(
            id=order.id,
            quantity=order.quantity,
            created_at=order.created_at,
            ticket_type='General',
            price=100.0,
            concert_title='Test Concert',
            concert_date=order.created_at,
        )

    async def find_by_id(self, *, order_id: UUID, requesting_user_id: UUID) -> Optional[OrderView]:
        for order in self.state.orders:
            if order.id == order_id and order.buyer_id == requesting_user_id:
                return self._view(order)
        return None

    async def find_by_buyer(self, *, buyer_id: UUID, query: OrderListQuery) -> List[OrderView]:
        orders = sorted(
            (order for order in self.state.orders if order.buyer_id == buyer_id),
            key=lambda order: order.created_at,
            reverse=True,
        )
        return [self._view(order) for order in orders[query.offset : query.offset + query.limit]]


class InMemoryUserRepo(IUserRepo):
    def __init__(self, state: InMemoryTicketingState, undo_log: list[Callable[[], None]]) -> None:
        self.state = state
        self.undo_log = undo_log

    async def create(self, *, user_entity: UserEntity) -> UserEntity:
        if any(user.email == user_entity.email for user in self.state.users.values()):
            raise ConflictError(EMAIL_ALREADY_REGISTERED)
        self.state.users[user_entity.id] = user_entity
        self.undo_log.append(lambda: self.state.users.pop(user_entity.id, None))
        return user_entity

    async def get_by_id(self, *, user_id: UUID) -> Optional[UserEntity]:
        return self.state.users.get(user_id)

    async def get_by_email(self, *, email: str) -> Optional[UserEntity]:
        return next((u for u in self.state.users.values() if u.email == email), None)


class InMemoryConcertRepo(IConcertRepo):
    def __init__(self, state: InMemoryTicketingState, undo_log: list[Callable[[], None]]) -> None:
        self.state = state
        self.undo_log = undo_log

    async def create_concert(self, *, concert: ConcertEntity) -> ConcertEntity:
        self.state.concerts[concert.id] = concert
        self.undo_log.append(lambda: self.state.concerts.pop(concert.id, None))
        return concert

    async def get_concert(self, *, concert_id: UUID) -> Optional[ConcertEntity]:
        return self.state.concerts.get(concert_id)

    async def list_concerts(self) -> List[ConcertEntity]:
        return sorted(self.state.concerts.values(), key=lambda concert: concert.date)

    async def create_ticket_class(self, *, ticket_class: TicketClassEntity) -> TicketClassEntity:
        self.state.ticket_classes[ticket_class.id] = ticket_class
        self.state.stock[ticket_class.id] = ticket_class.stock
        self.state.initial_stock[ticket_class.id] = ticket_class.stock

        def _undo() -> None:
            self.state.ticket_classes.pop(ticket_class.id, None)
            self.state.stock.pop(ticket_class.id, None)

        self.undo_log.append(_undo)
        return ticket_class

    async def list_ticket_classes(self, *, concert_id: UUID) -> List[TicketClassEntity]:
        return [t for t in self.state.ticket_classes.values() if t.concert_id == concert_id]


class InMemoryUnitOfWork(AbstractUnitOfWork):
    def __init__(self, state: InMemoryTicketingState, *, fail_on_record: bool = False) -> None:
        self.state = state
        self.fail_on_record = fail_on_record
        self.committed = False
        self.rolled_back = False

    async def __aenter__(self) -> 'InMemoryUnitOfWork':
        self._undo_log: list[Callable[[], None]] = []
        self.committed = False
        self.inventory = InMemoryInventoryStore(self.state, self._undo_log)
        self.orders = InMemoryOrderLedger(
            self.state, self._undo_log, fail_on_record=self.fail_on_record
        )
        self.users = InMemoryUserRepo(self.state, self._undo_log)
        self.concerts = InMemoryConcertRepo(self.state, self._undo_log)
        return self

    async def _commit(self) -> None:
        self._undo_log.clear()
        self.committed = True

    async def rollback(self) -> None:
        if self._undo_log:
            self.rolled_back = True
        for undo in reversed(self._undo_log):
            undo()
        self._undo_log.clear()


@pytest.fixture
def state() -> InMemoryTicketingState:
    return InMemoryTicketingState()


@pytest.fixture
def uow_factory(state: InMemoryTicketingState) -> Callable[..., InMemoryUnitOfWork]:
    def _factory(**kwargs: Any) -> InMemoryUnitOfWork:
        return InMemoryUnitOfWork(state, **kwargs)

    return _factory


@pytest.fixture
def buyer() -> Principal:
    return Principal(user_id=uuid7(), is_admin=False)


@pytest.fixture
def another_buyer() -> Principal:
    return Principal(user_id=uuid7(), is_admin=False)
