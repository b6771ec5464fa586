from datetime import datetime
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from concert_ticketing.platform.config.di import Container
from concert_ticketing.platform.database.unit_of_work import AbstractUnitOfWork
from concert_ticketing.platform.logging.loguru_io import Logger
from concert_ticketing.service.ticketing.domain.entity.concert_entity import ConcertEntity


class CreateConcertUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def create_concert(self, *, title: str, date: datetime, venue: str) -> ConcertEntity:
        concert = ConcertEntity.create(title=title, date=date, venue=venue)
        async with self.uow:
            created = await self.uow.concerts.create_concert(concert=concert)
            await self.uow.commit()
        return created
