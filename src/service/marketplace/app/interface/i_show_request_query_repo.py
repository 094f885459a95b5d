from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.marketplace.domain.entity.show_request_entity import (
    ShowRequest,
    ShowRequestStatus,
)


class IShowRequestQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, request_id: int) -> Optional[ShowRequest]:
        pass

    @abstractmethod
    async def list_for_artist(
        self, *, artist_id: int, status: Optional[ShowRequestStatus] = None
    ) -> List[ShowRequest]:
        pass

    @abstractmethod
    async def list_for_venue_owner(
        self, *, owner_id: int, status: Optional[ShowRequestStatus] = None
    ) -> List[ShowRequest]:
        pass
