from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from concert_ticketing.service.ticketing.domain.entity.concert_entity import ConcertEntity
from concert_ticketing.service.ticketing.domain.entity.ticket_entity import TicketClassEntity


class IConcertRepo(ABC):
    """Concert catalogue: concerts and the ticket classes published for them"""

    @abstractmethod
    async def create_concert(self, *, concert: ConcertEntity) -> ConcertEntity:
        pass

    @abstractmethod
    async def get_concert(self, *, concert_id: UUID) -> Optional[ConcertEntity]:
        pass

    @abstractmethod
    async def list_concerts(self) -> List[ConcertEntity]:
        pass

    @abstractmethod
    async def create_ticket_class(self, *, ticket_class: TicketClassEntity) -> TicketClassEntity:
        pass

    @abstractmethod
    async def list_ticket_classes(self, *, concert_id: UUID) -> List[TicketClassEntity]:
        pass
