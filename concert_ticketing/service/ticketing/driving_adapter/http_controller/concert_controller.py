from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from concert_ticketing.platform.logging.loguru_io import Logger
from concert_ticketing.service.ticketing.app.command.create_concert_use_case import (
    CreateConcertUseCase,
)
from concert_ticketing.service.ticketing.app.command.create_ticket_class_use_case import (
    CreateTicketClassUseCase,
)
from concert_ticketing.service.ticketing.app.query.list_concerts_use_case import (
    ListConcertsUseCase,
)
from concert_ticketing.service.ticketing.domain.entity.principal import Principal
from concert_ticketing.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    get_admin_principal,
)
from concert_ticketing.service.ticketing.driving_adapter.http_controller.schema.concert_schema import (
    ConcertCreateRequest,
    ConcertResponse,
    TicketClassCreateRequest,
    TicketClassResponse,
)


concert_router = APIRouter()
ticket_router = APIRouter()


@concert_router.post('', response_model=ConcertResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_concert(
    request: ConcertCreateRequest,
    principal: Principal = Depends(get_admin_principal),
    use_case: CreateConcertUseCase = Depends(CreateConcertUseCase.depends),
) -> ConcertResponse:
    concert = await use_case.create_concert(
        title=request.title, date=request.date, venue=request.venue
    )
    return ConcertResponse.model_validate(concert, from_attributes=True)


@concert_router.get('', response_model=List[ConcertResponse])
@Logger.io
async def list_concerts(
    use_case: ListConcertsUseCase = Depends(ListConcertsUseCase.depends),
) -> List[ConcertResponse]:
    concerts = await use_case.list_concerts()
    return [ConcertResponse.model_validate(concert, from_attributes=True) for concert in concerts]


@ticket_router.post('', response_model=TicketClassResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_ticket_class(
    request: TicketClassCreateRequest,
    principal: Principal = Depends(get_admin_principal),
    use_case: CreateTicketClassUseCase = Depends(CreateTicketClassUseCase.depends),
) -> TicketClassResponse:
    ticket_class = await use_case.create_ticket_class(
        concert_id=request.concert_id,
        ticket_type=request.ticket_type,
        price=request.price,
        stock=request.stock,
    )
    return TicketClassResponse.model_validate(ticket_class, from_attributes=True)


@ticket_router.get('', response_model=List[TicketClassResponse])
@Logger.io
async def list_ticket_classes(
    concert_id: UUID = Query(...),
    use_case: ListConcertsUseCase = Depends(ListConcertsUseCase.depends),
) -> List[TicketClassResponse]:
    ticket_classes = await use_case.list_ticket_classes(concert_id=concert_id)
    return [
        TicketClassResponse.model_validate(ticket_class, from_attributes=True)
        for ticket_class in ticket_classes
    ]
