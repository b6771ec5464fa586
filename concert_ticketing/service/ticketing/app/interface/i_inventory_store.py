from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from concert_ticketing.service.ticketing.domain.entity.order_entity import ConsumeResult


class IInventoryStore(ABC):
    """
    Stock counters of ticket classes

    Implementations must make `try_consume` a single atomic conditional
    decrement. Reading the stock and writing it back in two steps lets two
    buyers both see enough stock and oversell the ticket class.
    """

    @abstractmethod
    async def get_stock(self, *, ticket_id: UUID) -> Optional[int]:
        """Current stock, or None when the ticket class does not exist"""
        pass

    @abstractmethod
    async def try_consume(self, *, ticket_id: UUID, quantity: int) -> ConsumeResult:
        """Decrement stock by quantity only if stock >= quantity, as one indivisible step"""
        pass
