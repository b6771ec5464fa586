from typing import List, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from concert_ticketing.platform.config.di import Container
from concert_ticketing.platform.database.unit_of_work import AbstractUnitOfWork
from concert_ticketing.platform.logging.loguru_io import Logger
from concert_ticketing.service.ticketing.domain.entity.concert_entity import ConcertEntity
from concert_ticketing.service.ticketing.domain.entity.ticket_entity import TicketClassEntity


class ListConcertsUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def list_concerts(self) -> List[ConcertEntity]:
        async with self.uow:
            return await self.uow.concerts.list_concerts()

    @Logger.io
    async def list_ticket_classes(self, *, concert_id: UUID) -> List[TicketClassEntity]:
        async with self.uow:
            return await self.uow.concerts.list_ticket_classes(concert_id=concert_id)
