from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from concert_ticketing.platform.config.di import Container
from concert_ticketing.platform.database.unit_of_work import AbstractUnitOfWork
from concert_ticketing.platform.exception.exceptions import NotFoundError
from concert_ticketing.platform.logging.loguru_io import Logger
from concert_ticketing.service.ticketing.domain.entity.ticket_entity import TicketClassEntity


class CreateTicketClassUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def create_ticket_class(
        self, *, concert_id: UUID, ticket_type: str, price: float, stock: int
    ) -> TicketClassEntity:
        ticket_class = TicketClassEntity.create(
            concert_id=concert_id, ticket_type=ticket_type, price=price, stock=stock
        )
        async with self.uow:
            if not await self.uow.concerts.get_concert(concert_id=concert_id):
                raise NotFoundError('Concert not found')
            created = await self.uow.concerts.create_ticket_class(ticket_class=ticket_class)
            await self.uow.commit()
        return created
