from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from concert_ticketing.platform.logging.loguru_io import Logger
from concert_ticketing.service.ticketing.app.interface.i_concert_repo import IConcertRepo
from concert_ticketing.service.ticketing.domain.entity.concert_entity import ConcertEntity
from concert_ticketing.service.ticketing.domain.entity.ticket_entity import TicketClassEntity
from concert_ticketing.service.ticketing.driven_adapter.model.concert_model import ConcertModel
from concert_ticketing.service.ticketing.driven_adapter.model.ticket_model import TicketModel


class ConcertRepoImpl(IConcertRepo):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @Logger.io
    async def create_concert(self, *, concert: ConcertEntity) -> ConcertEntity:
        self.session.add(
            ConcertModel(id=concert.id, title=concert.title, date=concert.date, venue=concert.venue)
        )
        await self.session.flush()
        return concert

    @Logger.io
    async def get_concert(self, *, concert_id: UUID) -> Optional[ConcertEntity]:
        concert_model = await self.session.get(ConcertModel, concert_id)
        return self._concert_to_entity(concert_model) if concert_model else None

    @Logger.io
    async def list_concerts(self) -> List[ConcertEntity]:
        result = await self.session.execute(
            select(ConcertModel).order_by(ConcertModel.date, ConcertModel.id)
        )
        return [self._concert_to_entity(model) for model in result.scalars().all()]

    @Logger.io
    async def create_ticket_class(self, *, ticket_class: TicketClassEntity) -> TicketClassEntity:
        self.session.add(
            TicketModel(
                id=ticket_class.id,
                concert_id=ticket_class.concert_id,
                ticket_type=ticket_class.ticket_type,
                price=ticket_class.price,
                stock=ticket_class.stock,
            )
        )
        await self.session.flush()
        return ticket_class

    @Logger.io
    async def list_ticket_classes(self, *, concert_id: UUID) -> List[TicketClassEntity]:
        result = await self.session.execute(
            select(TicketModel)
            .where(TicketModel.concert_id == concert_id)
            .order_by(TicketModel.price, TicketModel.id)
        )
        return [self._ticket_to_entity(model) for model in result.scalars().all()]

    @staticmethod
    def _concert_to_entity(concert_model: ConcertModel) -> ConcertEntity:
        return ConcertEntity(
            id=concert_model.id,
            title=concert_model.title,
            date=concert_model.date,
            venue=concert_model.venue,
        )

    @staticmethod
    def _ticket_to_entity(ticket_model: TicketModel) -> TicketClassEntity:
        return TicketClassEntity(
            id=ticket_model.id,
            concert_id=ticket_model.concert_id,
            ticket_type=ticket_model.ticket_type,
            price=float(ticket_model.price),
            stock=ticket_model.stock,
        )
