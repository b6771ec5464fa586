"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from concert_ticketing.service.ticketing.driven_adapter.model.concert_model import ConcertModel
from concert_ticketing.service.ticketing.driven_adapter.model.order_model import OrderModel
from concert_ticketing.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from concert_ticketing.service.ticketing.driven_adapter.model.user_model import UserModel

__all__ = [
    'ConcertModel',
    'OrderModel',
    'TicketModel',
    'UserModel',
]
