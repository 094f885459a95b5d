from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.marketplace.domain.entity.event_entity import Event
from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.domain.enum.event_status import EventStatus


class IEventCommandRepo(ABC):
    @abstractmethod
    async def create_with_tickets(
        self, *, event: Event, tickets: List[Ticket]
    ) -> tuple[Event, List[Ticket]]:
        """Insert the event and its ticket types in one transaction"""
        pass

    @abstractmethod
    async def update_details(self, *, event: Event) -> Optional[Event]:
        """
        Write name, description, event_date and duration; never status.
        Returns None when the stored event is already canceled or completed.
        """
        pass

    @abstractmethod
    async def update_status_if(
        self, *, event_id: int, expected: EventStatus, new_status: EventStatus
    ) -> Optional[Event]:
        """Compare-and-set; returns None when the stored status is not `expected`."""
        pass
