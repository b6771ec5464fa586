from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from concert_ticketing.service.ticketing.domain.entity.order_entity import (
    OrderEntity,
    OrderListQuery,
    OrderView,
)


class IOrderLedger(ABC):
    """Append-only record of orders"""

    @abstractmethod
    async def record(self, *, buyer_id: UUID, ticket_id: UUID, quantity: int) -> OrderEntity:
        """Insert an order row. No business validation happens here."""
        pass

    @abstractmethod
    async def find_by_id(self, *, order_id: UUID, requesting_user_id: UUID) -> Optional[OrderView]:
        """Only returns the order when it belongs to the requesting user"""
        pass

    @abstractmethod
    async def find_by_buyer(self, *, buyer_id: UUID, query: OrderListQuery) -> List[OrderView]:
        pass
