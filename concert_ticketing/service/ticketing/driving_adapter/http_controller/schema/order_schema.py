from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from concert_ticketing.service.ticketing.domain.entity.order_entity import OrderEntity


class OrderCreateRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {'ticket_id': '01936d8f-5e73-7c4e-a9c5-123456789abc', 'quantity': 2}
        },
    }

    ticket_id: UUID
    quantity: int = Field(..., ge=1, le=OrderEntity.MAX_QUANTITY)


class OrderResponse(BaseModel):
    id: UUID
    ticket_id: UUID
    quantity: int
    created_at: datetime


class OrderViewResponse(BaseModel):
    id: UUID
    quantity: int
    created_at: datetime
    ticket_type: str
    price: float
    concert_title: str
    concert_date: datetime
