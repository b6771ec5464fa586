"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from concert_ticketing.service.ticketing.app.command import (
    create_concert_use_case,
    create_order_use_case,
    create_ticket_class_use_case,
    register_user_use_case,
)
from concert_ticketing.service.ticketing.app.query import (
    get_order_use_case,
    list_concerts_use_case,
    list_orders_use_case,
    user_query_use_case,
)
from concert_ticketing.service.ticketing.driving_adapter.http_controller import user_controller
from concert_ticketing.service.ticketing.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    create_order_use_case,
    create_concert_use_case,
    create_ticket_class_use_case,
    register_user_use_case,
    get_order_use_case,
    list_orders_use_case,
    list_concerts_use_case,
    user_query_use_case,
    role_auth,
    user_controller,
]
