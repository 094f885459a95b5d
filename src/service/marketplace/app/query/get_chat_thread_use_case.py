from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_message_command_repo import IMessageCommandRepo
from src.service.marketplace.app.interface.i_message_query_repo import IMessageQueryRepo
from src.service.marketplace.app.interface.i_show_request_query_repo import (
    IShowRequestQueryRepo,
)
from src.service.marketplace.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.marketplace.app.query.chat_access import resolve_chat_counterpart
from src.service.marketplace.domain.entity.message_entity import Message


class GetChatThreadUseCase:
    def __init__(
        self,
        *,
        show_request_query_repo: IShowRequestQueryRepo,
        venue_query_repo: IVenueQueryRepo,
        message_query_repo: IMessageQueryRepo,
        message_command_repo: IMessageCommandRepo,
    ) -> None:
        self.show_request_query_repo = show_request_query_repo
        self.venue_query_repo = venue_query_repo
        self.message_query_repo = message_query_repo
        self.message_command_repo = message_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        show_request_query_repo: IShowRequestQueryRepo = Depends(
            Provide[Container.show_request_query_repo]
        ),
        venue_query_repo: IVenueQueryRepo = Depends(Provide[Container.venue_query_repo]),
        message_query_repo: IMessageQueryRepo = Depends(Provide[Container.message_query_repo]),
        message_command_repo: IMessageCommandRepo = Depends(
            Provide[Container.message_command_repo]
        ),
    ) -> Self:
        return cls(
            show_request_query_repo=show_request_query_repo,
            venue_query_repo=venue_query_repo,
            message_query_repo=message_query_repo,
            message_command_repo=message_command_repo,
        )

    @Logger.io
    async def ensure_access(self, *, request_id: int, viewer_id: int) -> int:
        """Gate for the chat stream; returns the counterpart id"""
        return await resolve_chat_counterpart(
            show_request_query_repo=self.show_request_query_repo,
            venue_query_repo=self.venue_query_repo,
            request_id=request_id,
            participant_id=viewer_id,
        )

    @Logger.io
    async def retrieve(self, *, request_id: int, viewer_id: int) -> List[Message]:
        """
        Whole thread, oldest first, as it was before this read

        Messages addressed to the viewer are marked read afterwards; the
        update is a set operation so concurrent readers cannot conflict.
        """
        await self.ensure_access(request_id=request_id, viewer_id=viewer_id)

        messages = await self.message_query_repo.list_by_request(show_request_id=request_id)
        marked = await self.message_command_repo.mark_read(
            show_request_id=request_id, receiver_id=viewer_id
        )
        if marked:
            Logger.base.debug(f'💬 [CHAT] Marked {marked} messages read for {viewer_id}')
        return messages

    @Logger.io
    async def unread_count(self, *, viewer_id: int) -> int:
        return await self.message_query_repo.count_unread(receiver_id=viewer_id)
