from abc import ABC, abstractmethod

from src.service.marketplace.domain.entity.message_entity import Message


class IMessageCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, message: Message) -> Message:
        pass

    @abstractmethod
    async def mark_read(self, *, show_request_id: int, receiver_id: int) -> int:
        """Set read=true on unread messages addressed to receiver; returns rows changed"""
        pass
