from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from concert_ticketing.platform.logging.loguru_io import Logger
from concert_ticketing.service.ticketing.app.interface.i_inventory_store import IInventoryStore
from concert_ticketing.service.ticketing.domain.entity.order_entity import ConsumeResult
from concert_ticketing.service.ticketing.driven_adapter.model.ticket_model import TicketModel


class InventoryStoreImpl(IInventoryStore):
    """Stock counters kept in the `tickets` table, bound to the unit of work's session"""

    def __init__(self, *, session: AsyncSession):
        self.session = session

    @Logger.io
    async def get_stock(self, *, ticket_id: UUID) -> Optional[int]:
        result = await self.session.execute(
            select(TicketModel.stock).where(TicketModel.id == ticket_id)
        )
        return result.scalar_one_or_none()

    @Logger.io
    async def try_consume(self, *, ticket_id: UUID, quantity: int) -> ConsumeResult:
        # Check and decrement in one statement; the row lock taken by UPDATE
        # serializes concurrent consumers of the same ticket class only
        stmt = (
            update(TicketModel)
            .where(TicketModel.id == ticket_id)
            .where(TicketModel.stock >= quantity)
            .values(stock=TicketModel.stock - quantity)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)

        if result.rowcount == 1:  # type: ignore[attr-defined]
            return ConsumeResult.OK

        check_result = await self.session.execute(
            select(TicketModel.id).where(TicketModel.id == ticket_id)
        )
        if check_result.scalar_one_or_none() is None:
            return ConsumeResult.NOT_FOUND
        return ConsumeResult.INSUFFICIENT_STOCK
