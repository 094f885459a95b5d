from abc import ABC, abstractmethod
from typing import Optional

from src.service.marketplace.domain.entity.show_request_entity import (
    ShowRequest,
    ShowRequestStatus,
)


class IShowRequestCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, show_request: ShowRequest) -> ShowRequest:
        pass

    @abstractmethod
    async def update_status_if_pending(
        self, *, request_id: int, new_status: ShowRequestStatus
    ) -> Optional[ShowRequest]:
        """Conditional update `WHERE status = 'pending'`; None when no row changed"""
        pass
