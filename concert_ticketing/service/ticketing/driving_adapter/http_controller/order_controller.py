from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from opentelemetry import trace

from concert_ticketing.platform.logging.loguru_io import Logger
from concert_ticketing.service.ticketing.app.command.create_order_use_case import (
    CreateOrderUseCase,
)
from concert_ticketing.service.ticketing.app.query.get_order_use_case import GetOrderUseCase
from concert_ticketing.service.ticketing.app.query.list_orders_use_case import ListOrdersUseCase
from concert_ticketing.service.ticketing.domain.entity.order_entity import OrderListQuery
from concert_ticketing.service.ticketing.domain.entity.principal import Principal
from concert_ticketing.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    get_current_principal,
)
from concert_ticketing.service.ticketing.driving_adapter.http_controller.schema.order_schema import (
    OrderCreateRequest,
    OrderResponse,
    OrderViewResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_order(
    request: OrderCreateRequest,
    principal: Principal = Depends(get_current_principal),
    use_case: CreateOrderUseCase = Depends(CreateOrderUseCase.depends),
) -> OrderResponse:
    with tracer.start_as_current_span('controller.create_order') as span:
        span.set_attribute('ticket_id', str(request.ticket_id))
        span.set_attribute('quantity', request.quantity)

        order = await use_case.create_order(
            principal=principal, ticket_id=request.ticket_id, quantity=request.quantity
        )
        return OrderResponse.model_validate(order, from_attributes=True)


@router.get('', response_model=List[OrderViewResponse])
@Logger.io
async def list_orders(
    page: int = Query(1),
    limit: int = Query(10),
    date_from: Optional[date] = Query(None, alias='from'),
    date_to: Optional[date] = Query(None, alias='to'),
    concert_id: Optional[UUID] = Query(None),
    principal: Principal = Depends(get_current_principal),
    use_case: ListOrdersUseCase = Depends(ListOrdersUseCase.depends),
) -> List[OrderViewResponse]:
    # Out-of-range page/limit are clamped rather than rejected
    query = OrderListQuery(
        page=page, limit=limit, date_from=date_from, date_to=date_to, concert_id=concert_id
    )
    orders = await use_case.list_orders(principal=principal, query=query)
    return [OrderViewResponse.model_validate(order, from_attributes=True) for order in orders]


@router.get('/{order_id}', response_model=OrderViewResponse)
@Logger.io
async def get_order(
    order_id: UUID,
    principal: Principal = Depends(get_current_principal),
    use_case: GetOrderUseCase = Depends(GetOrderUseCase.depends),
) -> OrderViewResponse:
    order = await use_case.get_order(principal=principal, order_id=order_id)
    return OrderViewResponse.model_validate(order, from_attributes=True)
