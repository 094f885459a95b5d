from typing import AsyncContextManager, Callable
import uuid

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_message_command_repo import IMessageCommandRepo
from src.service.marketplace.domain.entity.message_entity import Message
from src.service.marketplace.driven_adapter.model.message_model import MessageModel
from src.service.marketplace.driven_adapter.repo.message_query_repo_impl import (
    message_model_to_entity,
)


class MessageCommandRepoImpl(IMessageCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, message: Message) -> Message:
        async with self.session_factory() as session:
            model = MessageModel(
                id=uuid.UUID(str(message.id)),
                show_request_id=message.show_request_id,
                sender_id=message.sender_id,
                receiver_id=message.receiver_id,
                content=message.content,
                read=False,
            )
            session.add(model)
            await session.commit()
            await session.refresh(model)

            return message_model_to_entity(model)

    @Logger.io
    async def mark_read(self, *, show_request_id: int, receiver_id: int) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                update(MessageModel)
                .where(
                    MessageModel.show_request_id == show_request_id,
                    MessageModel.receiver_id == receiver_id,
                    MessageModel.read.is_(False),
                )
                .values(read=True)
            )
            await session.commit()
            return result.rowcount or 0
