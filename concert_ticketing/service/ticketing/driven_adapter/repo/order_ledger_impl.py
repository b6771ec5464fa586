from datetime import date, datetime, time, timedelta
from typing import List, Optional
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from concert_ticketing.platform.logging.loguru_io import Logger
from concert_ticketing.service.ticketing.app.interface.i_order_ledger import IOrderLedger
from concert_ticketing.service.ticketing.domain.entity.order_entity import (
    OrderEntity,
    OrderListQuery,
    OrderView,
)
from concert_ticketing.service.ticketing.driven_adapter.model.concert_model import ConcertModel
from concert_ticketing.service.ticketing.driven_adapter.model.order_model import OrderModel
from concert_ticketing.service.ticketing.driven_adapter.model.ticket_model import TicketModel


def _start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


class OrderLedgerImpl(IOrderLedger):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @Logger.io
    async def record(self, *, buyer_id: UUID, ticket_id: UUID, quantity: int) -> OrderEntity:
        order = OrderEntity(buyer_id=buyer_id, ticket_id=ticket_id, quantity=quantity)
        self.session.add(
            OrderModel(
                id=order.id,
                user_id=order.buyer_id,
                ticket_id=order.ticket_id,
                quantity=order.quantity,
                created_at=order.created_at,
            )
        )
        await self.session.flush()
        return order

    @Logger.io
    async def find_by_id(self, *, order_id: UUID, requesting_user_id: UUID) -> Optional[OrderView]:
        stmt = self._view_query().where(
            OrderModel.id == order_id,
            OrderModel.user_id == requesting_user_id,
        )
        result = await self.session.execute(stmt)
        row = result.one_or_none()
        return self._row_to_view(row) if row else None

    @Logger.io
    async def find_by_buyer(self, *, buyer_id: UUID, query: OrderListQuery) -> List[OrderView]:
        stmt = self._view_query().where(OrderModel.user_id == buyer_id)

        # Calendar-date bounds, both inclusive
        if query.date_from:
            stmt = stmt.where(OrderModel.created_at >= _start_of_day(query.date_from))
        if query.date_to:
            stmt = stmt.where(
                OrderModel.created_at < _start_of_day(query.date_to + timedelta(days=1))
            )
        if query.concert_id:
            stmt = stmt.where(ConcertModel.id == query.concert_id)

        stmt = (
            stmt.order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
            .limit(query.limit)
            .offset(query.offset)
        )
        result = await self.session.execute(stmt)
        return [self._row_to_view(row) for row in result.all()]

    @staticmethod
    def _view_query() -> Select:
        return (
            select(
                OrderModel.id,
                OrderModel.quantity,
                OrderModel.created_at,
                TicketModel.ticket_type,
                TicketModel.price,
                ConcertModel.title,
                ConcertModel.date,
            )
            .join(TicketModel, TicketModel.id == OrderModel.ticket_id)
            .join(ConcertModel, ConcertModel.id == TicketModel.concert_id)
        )

    @staticmethod
    def _row_to_view(row: Row) -> OrderView:
        return OrderView(
            id=row.id,
            quantity=row.quantity,
            created_at=row.created_at,
            ticket_type=row.ticket_type,
            price=float(row.price),
            concert_title=row.title,
            concert_date=row.date,
        )
