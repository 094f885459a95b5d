from typing import Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_message_command_repo import IMessageCommandRepo
from src.service.marketplace.app.interface.i_notification_broadcaster import (
    INotificationBroadcaster,
)
from src.service.marketplace.app.interface.i_show_request_query_repo import (
    IShowRequestQueryRepo,
)
from src.service.marketplace.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.marketplace.app.query.chat_access import resolve_chat_counterpart
from src.service.marketplace.domain.entity.message_entity import Message
from src.service.marketplace.domain.enum.notification_type import NotificationType


class SendMessageUseCase:
    def __init__(
        self,
        *,
        show_request_query_repo: IShowRequestQueryRepo,
        venue_query_repo: IVenueQueryRepo,
        message_command_repo: IMessageCommandRepo,
        notification_broadcaster: INotificationBroadcaster,
    ) -> None:
        self.show_request_query_repo = show_request_query_repo
        self.venue_query_repo = venue_query_repo
        self.message_command_repo = message_command_repo
        self.notification_broadcaster = notification_broadcaster
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        show_request_query_repo: IShowRequestQueryRepo = Depends(
            Provide[Container.show_request_query_repo]
        ),
        venue_query_repo: IVenueQueryRepo = Depends(Provide[Container.venue_query_repo]),
        message_command_repo: IMessageCommandRepo = Depends(
            Provide[Container.message_command_repo]
        ),
        notification_broadcaster: INotificationBroadcaster = Depends(
            Provide[Container.notification_broadcaster]
        ),
    ) -> Self:
        return cls(
            show_request_query_repo=show_request_query_repo,
            venue_query_repo=venue_query_repo,
            message_command_repo=message_command_repo,
            notification_broadcaster=notification_broadcaster,
        )

    @Logger.io
    async def send(self, *, request_id: int, sender_id: int, content: str) -> Message:
        with self.tracer.start_as_current_span(
            'use_case.send_message',
            attributes={'show_request.id': request_id, 'sender.id': sender_id},
        ):
            receiver_id = await resolve_chat_counterpart(
                show_request_query_repo=self.show_request_query_repo,
                venue_query_repo=self.venue_query_repo,
                request_id=request_id,
                participant_id=sender_id,
            )

            message = Message.create(
                show_request_id=request_id,
                sender_id=sender_id,
                receiver_id=receiver_id,
                content=content,
            )
            stored = await self.message_command_repo.create(message=message)
            metrics.messages_sent.inc()

        Logger.base.info(f'💬 [CHAT] Request {request_id}: {sender_id} -> {receiver_id}')

        payload = attrs.asdict(stored)
        await self.notification_broadcaster.publish_chat_message(
            request_id=request_id, payload=payload
        )
        await self.notification_broadcaster.notify_user(
            user_id=receiver_id, event_type=NotificationType.MESSAGE_SENT, payload=payload
        )
        return stored
