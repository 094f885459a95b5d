from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from sse_starlette.sse import EventSourceResponse

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_notification_broadcaster import (
    INotificationBroadcaster,
)
from src.service.marketplace.app.query.get_chat_thread_use_case import GetChatThreadUseCase
from src.service.marketplace.domain.value_object.session import Session
from src.service.marketplace.driven_adapter.sse.notification_broadcaster_impl import user_channel
from src.service.marketplace.driving_adapter.http_controller.auth.role_auth import (
    get_current_session,
)
from src.service.marketplace.driving_adapter.http_controller.schema.show_request_schema import (
    UnreadCountResponse,
)
from src.service.marketplace.driving_adapter.http_controller.sse_stream import (
    channel_event_source,
)


router = APIRouter()


@router.get('/unread', response_model=UnreadCountResponse)
@Logger.io
async def get_unread_count(
    session: Session = Depends(get_current_session),
    use_case: GetChatThreadUseCase = Depends(GetChatThreadUseCase.depends),
) -> UnreadCountResponse:
    return UnreadCountResponse(unread=await use_case.unread_count(viewer_id=session.principal_id))


@router.get('/sse', status_code=status.HTTP_200_OK)
@inject
async def stream_notifications(
    session: Session = Depends(get_current_session),
    broadcaster: INotificationBroadcaster = Depends(Provide[Container.notification_broadcaster]),
) -> EventSourceResponse:
    """
    Personal feed: request_created, request_status_changed, booking_created,
    message_sent. Delivered only while connected.
    """
    return channel_event_source(
        broadcaster=broadcaster, channel=user_channel(session.principal_id)
    )
