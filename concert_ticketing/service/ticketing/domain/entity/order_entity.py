from datetime import date, datetime, timezone
from enum import StrEnum
from uuid import UUID

import attrs
from uuid_utils.compat import uuid7

from concert_ticketing.platform.exception.exceptions import DomainError
from concert_ticketing.service.ticketing.domain.entity.ticket_entity import MAX_STOCK


class ConsumeResult(StrEnum):
    """Outcome of one atomic stock consume attempt"""

    OK = 'ok'
    INSUFFICIENT_STOCK = 'insufficient_stock'
    NOT_FOUND = 'not_found'


def utc_now() -> datetime:
    # Stored without tzinfo; every timestamp in the system is UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


@attrs.define(frozen=True)
class OrderEntity:
    """An order is written once per successful transaction and never changed"""

    buyer_id: UUID
    ticket_id: UUID
    quantity: int
    id: UUID = attrs.field(factory=uuid7)
    created_at: datetime = attrs.field(factory=utc_now)

    MAX_QUANTITY = MAX_STOCK

    @staticmethod
    def validate_quantity(quantity: int) -> None:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise DomainError('Quantity must be at least 1')
        if quantity > OrderEntity.MAX_QUANTITY:
            raise DomainError(f'Quantity must be at most {OrderEntity.MAX_QUANTITY}')


@attrs.define(frozen=True)
class OrderView:
    """Order joined with its ticket class and concert, as shown to the buyer"""

    id: UUID
    quantity: int
    created_at: datetime
    ticket_type: str
    price: float
    concert_title: str
    concert_date: datetime


@attrs.define
class OrderListQuery:
    page: int = 1
    limit: int = 10
    date_from: date | None = None  # inclusive calendar date
    date_to: date | None = None  # inclusive calendar date
    concert_id: UUID | None = None

    MAX_LIMIT = 100
    # Keeps (page - 1) * limit inside a 32-bit OFFSET
    MAX_PAGE = 1_000_000

    def __attrs_post_init__(self) -> None:
        self.page = min(max(self.page, 1), self.MAX_PAGE)
        self.limit = min(max(self.limit, 1), self.MAX_LIMIT)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
