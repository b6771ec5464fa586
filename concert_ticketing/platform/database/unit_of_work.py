"""
Unit of Work Pattern

Architecture:
- UoW owns the database session lifecycle for one business operation
- UoW owns commit/rollback
- Repositories obtain the shared session through the UoW
- Use cases coordinate several repositories through the UoW, so their writes
  commit or roll back together
"""

from __future__ import annotations

import abc
from contextlib import AbstractAsyncContextManager, AsyncExitStack
from typing import TYPE_CHECKING, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from concert_ticketing.service.ticketing.app.interface.i_concert_repo import IConcertRepo
    from concert_ticketing.service.ticketing.app.interface.i_inventory_store import (
        IInventoryStore,
    )
    from concert_ticketing.service.ticketing.app.interface.i_order_ledger import IOrderLedger
    from concert_ticketing.service.ticketing.app.interface.i_user_repo import IUserRepo


SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the ticketing service

    Usage:
        async with uow:
            await uow.inventory.try_consume(ticket_id=..., quantity=...)
            order = await uow.orders.record(...)
            await uow.commit()

    Leaving the block without commit() discards every write made inside it.
    """

    users: IUserRepo
    concerts: IConcertRepo
    inventory: IInventoryStore
    orders: IOrderLedger

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    One session (and so one connection and one transaction) per `async with`
    block. A fresh instance is provided per request by the DI container.
    """

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory
        self.session: Optional[AsyncSession] = None
        self._exit_stack: Optional[AsyncExitStack] = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from concert_ticketing.service.ticketing.driven_adapter.repo.concert_repo_impl import (
            ConcertRepoImpl,
        )
        from concert_ticketing.service.ticketing.driven_adapter.repo.inventory_store_impl import (
            InventoryStoreImpl,
        )
        from concert_ticketing.service.ticketing.driven_adapter.repo.order_ledger_impl import (
            OrderLedgerImpl,
        )
        from concert_ticketing.service.ticketing.driven_adapter.repo.user_repo_impl import (
            UserRepoImpl,
        )

        self._exit_stack = AsyncExitStack()
        self.session = await self._exit_stack.enter_async_context(self.session_factory())

        # Create repositories with shared session
        self.users = UserRepoImpl(session=self.session)
        self.concerts = ConcertRepoImpl(session=self.session)
        self.inventory = InventoryStoreImpl(session=self.session)
        self.orders = OrderLedgerImpl(session=self.session)

        return await super().__aenter__()  # type: ignore[return-value]

    async def __aexit__(self, *args):
        try:
            await super().__aexit__(*args)
        finally:
            exit_stack, self._exit_stack, self.session = self._exit_stack, None, None
            if exit_stack is not None:
                await exit_stack.aclose()

    async def _commit(self) -> None:
        if self.session is None:
            raise RuntimeError('Unit of work used outside of its context')
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
