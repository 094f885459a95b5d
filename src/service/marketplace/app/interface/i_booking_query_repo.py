from abc import ABC, abstractmethod
from typing import Any, Dict, List


class IBookingQueryRepo(ABC):
    @abstractmethod
    async def list_by_user(self, *, user_id: int) -> List[Dict[str, Any]]:
        """Bookings of one buyer, newest first, joined with ticket type and event"""
        pass

    @abstractmethod
    async def get_ticket_stats(self, *, event_id: int) -> List[Dict[str, Any]]:
        """Per ticket type: inventory plus summed booked quantity and revenue"""
        pass
