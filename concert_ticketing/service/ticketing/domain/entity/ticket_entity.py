from uuid import UUID

import attrs
from uuid_utils.compat import uuid7

from concert_ticketing.platform.exception.exceptions import DomainError


# Column limits: stock is a 32-bit INTEGER, price a NUMERIC(10, 2)
MAX_STOCK = 2_147_483_647
MAX_PRICE = 100_000_000  # exclusive


@attrs.define
class TicketClassEntity:
    """
    A purchasable ticket type of one concert

    `stock` only ever decreases after creation, and only through an order
    transaction's atomic consume step.
    """

    concert_id: UUID
    ticket_type: str
    price: float
    stock: int
    id: UUID = attrs.field(factory=uuid7)

    @classmethod
    def create(
        cls, *, concert_id: UUID, ticket_type: str, price: float, stock: int
    ) -> 'TicketClassEntity':
        ticket_type = ticket_type.strip()
        if not ticket_type:
            raise DomainError('Ticket type is required')
        if not 0 <= price < MAX_PRICE:
            raise DomainError(f'Price must be at least 0 and below {MAX_PRICE}')
        if not 0 <= stock <= MAX_STOCK:
            raise DomainError(f'Stock must be between 0 and {MAX_STOCK}')
        return cls(concert_id=concert_id, ticket_type=ticket_type, price=price, stock=stock)
