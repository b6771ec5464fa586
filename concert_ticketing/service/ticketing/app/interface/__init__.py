"""Application layer interfaces (Ports)"""

from concert_ticketing.service.ticketing.app.interface.i_concert_repo import IConcertRepo
from concert_ticketing.service.ticketing.app.interface.i_inventory_store import IInventoryStore
from concert_ticketing.service.ticketing.app.interface.i_order_ledger import IOrderLedger
from concert_ticketing.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from concert_ticketing.service.ticketing.app.interface.i_user_repo import IUserRepo


__all__ = [
    'IConcertRepo',
    'IInventoryStore',
    'IOrderLedger',
    'IPasswordHasher',
    'IUserRepo',
]
