import time
from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from concert_ticketing.platform.config.di import Container
from concert_ticketing.platform.database.unit_of_work import AbstractUnitOfWork
from concert_ticketing.platform.exception.exceptions import DomainError, NotFoundError
from concert_ticketing.platform.logging.loguru_io import Logger
from concert_ticketing.platform.metrics.ticketing_metrics import OrderResult, metrics
from concert_ticketing.service.ticketing.domain.entity.order_entity import (
    ConsumeResult,
    OrderEntity,
)
from concert_ticketing.service.ticketing.domain.entity.principal import Principal


TICKET_NOT_FOUND = 'Ticket not found'
INSUFFICIENT_STOCK = 'Insufficient stock'


class CreateOrderUseCase:
    """
    Place an order: consume stock and record the order as one atomic unit

    Flow (single unit of work, single database transaction):
    1. Validate quantity (>= 1)
    2. Ticket class exists, else NotFound
    3. Atomic conditional decrement (stock >= quantity), else BadRequest
    4. Record the order in the same transaction
    5. Commit

    Any failure before the commit leaves stock and orders untouched: leaving the
    unit of work without commit rolls the decrement back. Insufficient stock is
    a final answer and is never retried.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def create_order(
        self, *, principal: Principal, ticket_id: UUID, quantity: int
    ) -> OrderEntity:
        OrderEntity.validate_quantity(quantity)

        started_at = time.perf_counter()
        result = OrderResult.FAILED
        with self.tracer.start_as_current_span(
            'use_case.create_order',
            attributes={
                'order.ticket_id': str(ticket_id),
                'order.quantity': quantity,
                'user.id': str(principal.user_id),
            },
        ):
            try:
                async with self.uow:
                    if await self.uow.inventory.get_stock(ticket_id=ticket_id) is None:
                        result = OrderResult.NOT_FOUND
                        raise NotFoundError(TICKET_NOT_FOUND)

                    consumed = await self.uow.inventory.try_consume(
                        ticket_id=ticket_id, quantity=quantity
                    )
                    if consumed is ConsumeResult.NOT_FOUND:
                        result = OrderResult.NOT_FOUND
                        raise NotFoundError(TICKET_NOT_FOUND)
                    if consumed is ConsumeResult.INSUFFICIENT_STOCK:
                        result = OrderResult.INSUFFICIENT_STOCK
                        raise DomainError(INSUFFICIENT_STOCK)

                    order = await self.uow.orders.record(
                        buyer_id=principal.user_id, ticket_id=ticket_id, quantity=quantity
                    )
                    await self.uow.commit()
                    result = OrderResult.CREATED
            finally:
                metrics.record_order(
                    result=result,
                    quantity=quantity,
                    duration=time.perf_counter() - started_at,
                )

        Logger.base.info(
            f'[ORDER] {order.id} created: ticket={ticket_id} quantity={quantity} buyer={principal.user_id}'
        )
        return order
