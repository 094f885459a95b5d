from abc import ABC, abstractmethod

from src.service.marketplace.domain.entity.venue_entity import Venue


class IVenueCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, venue: Venue) -> Venue:
        pass

    @abstractmethod
    async def update(self, *, venue: Venue) -> Venue:
        pass
