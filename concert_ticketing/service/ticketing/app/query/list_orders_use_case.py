from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from concert_ticketing.platform.config.di import Container
from concert_ticketing.platform.database.unit_of_work import AbstractUnitOfWork
from concert_ticketing.platform.exception.exceptions import DomainError
from concert_ticketing.platform.logging.loguru_io import Logger
from concert_ticketing.service.ticketing.domain.entity.order_entity import (
    OrderListQuery,
    OrderView,
)
from concert_ticketing.service.ticketing.domain.entity.principal import Principal


class ListOrdersUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def list_orders(self, *, principal: Principal, query: OrderListQuery) -> List[OrderView]:
        if query.date_from and query.date_to and query.date_from > query.date_to:
            raise DomainError("'from' must not be after 'to'")

        async with self.uow:
            return await self.uow.orders.find_by_buyer(buyer_id=principal.user_id, query=query)
