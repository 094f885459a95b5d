from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.marketplace.domain.entity.venue_entity import Venue


class IVenueQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, venue_id: int) -> Optional[Venue]:
        pass

    @abstractmethod
    async def list_venues(
        self,
        *,
        search: Optional[str] = None,
        min_capacity: Optional[int] = None,
        amenity: Optional[str] = None,
        owner_id: Optional[int] = None,
    ) -> List[Venue]:
        pass
