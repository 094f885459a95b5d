from abc import ABC, abstractmethod
from typing import List

from src.service.marketplace.domain.entity.message_entity import Message


class IMessageQueryRepo(ABC):
    @abstractmethod
    async def list_by_request(self, *, show_request_id: int) -> List[Message]:
        """All messages of the thread, created_at ascending"""
        pass

    @abstractmethod
    async def count_unread(self, *, receiver_id: int) -> int:
        pass
