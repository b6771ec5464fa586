from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from concert_ticketing.service.ticketing.domain.entity.ticket_entity import MAX_PRICE, MAX_STOCK


class ConcertCreateRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'title': 'Summer Night Live',
                'date': '2026-08-01T19:30:00',
                'venue': 'Taipei Arena',
            }
        },
    }

    title: str = Field(..., min_length=3, max_length=255)
    date: datetime
    venue: str = Field(..., min_length=2, max_length=255)


class ConcertResponse(BaseModel):
    id: UUID
    title: str
    date: datetime
    venue: str


class TicketClassCreateRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'concert_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'ticket_type': 'VIP',
                'price': 3200.0,
                'stock': 100,
            }
        },
    }

    concert_id: UUID
    ticket_type: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., ge=0, lt=MAX_PRICE)
    stock: int = Field(..., ge=0, le=MAX_STOCK)


class TicketClassResponse(BaseModel):
    id: UUID
    concert_id: UUID
    ticket_type: str
    price: float
    stock: int
