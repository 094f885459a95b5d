from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.marketplace.domain.entity.artist_entity import Artist


class IArtistRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, artist_id: int) -> Optional[Artist]:
        pass

    @abstractmethod
    async def create_if_absent(self, *, artist: Artist) -> tuple[Artist, bool]:
        """Insert unless a row with the same id exists. Returns (artist, created)."""
        pass

    @abstractmethod
    async def update(self, *, artist: Artist) -> Artist:
        pass

    @abstractmethod
    async def list_artists(self, *, genre: Optional[str] = None) -> List[Artist]:
        pass
