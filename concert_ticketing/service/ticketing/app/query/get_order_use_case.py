from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from concert_ticketing.platform.config.di import Container
from concert_ticketing.platform.database.unit_of_work import AbstractUnitOfWork
from concert_ticketing.platform.exception.exceptions import NotFoundError
from concert_ticketing.platform.logging.loguru_io import Logger
from concert_ticketing.service.ticketing.domain.entity.order_entity import OrderView
from concert_ticketing.service.ticketing.domain.entity.principal import Principal


class GetOrderUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def get_order(self, *, principal: Principal, order_id: UUID) -> OrderView:
        # Someone else's order is reported exactly like a missing one
        async with self.uow:
            order = await self.uow.orders.find_by_id(
                order_id=order_id, requesting_user_id=principal.user_id
            )

        if not order:
            raise NotFoundError('Order not found')

        return order
