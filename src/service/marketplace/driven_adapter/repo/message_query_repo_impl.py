from typing import AsyncContextManager, Callable, List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_message_query_repo import IMessageQueryRepo
from src.service.marketplace.domain.entity.message_entity import Message
from src.service.marketplace.driven_adapter.model.message_model import MessageModel


def message_model_to_entity(model: MessageModel) -> Message:
    return Message(
        id=UUID(str(model.id)),  # stdlib uuid.UUID from the driver
        show_request_id=model.show_request_id,
        sender_id=model.sender_id,
        receiver_id=model.receiver_id,
        content=model.content,
        read=model.read,
        created_at=model.created_at,
    )


class MessageQueryRepoImpl(IMessageQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_by_request(self, *, show_request_id: int) -> List[Message]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(MessageModel)
                .where(MessageModel.show_request_id == show_request_id)
                .order_by(MessageModel.created_at, MessageModel.id)
            )
            return [message_model_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def count_unread(self, *, receiver_id: int) -> int:
        async with self.session_factory() as session:
            count = await session.scalar(
                select(func.count(MessageModel.id)).where(
                    MessageModel.receiver_id == receiver_id,
                    MessageModel.read.is_(False),
                )
            )
            return count or 0
