from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.marketplace.domain.entity.event_entity import Event
from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.domain.enum.event_status import EventStatus


class IEventQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, event_id: int) -> Optional[Event]:
        pass

    @abstractmethod
    async def list_events(
        self,
        *,
        status: Optional[EventStatus] = None,
        venue_id: Optional[int] = None,
        artist_id: Optional[int] = None,
    ) -> List[Event]:
        pass

    @abstractmethod
    async def list_tickets(self, *, event_id: int) -> List[Ticket]:
        pass

    @abstractmethod
    async def get_ticket(self, *, ticket_id: int) -> Optional[Ticket]:
        pass
