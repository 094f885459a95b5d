from typing import List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query, status
from sse_starlette.sse import EventSourceResponse

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.create_show_request_use_case import (
    CreateShowRequestUseCase,
)
from src.service.marketplace.app.command.ensure_artist_profile_use_case import (
    EnsureArtistProfileUseCase,
)
from src.service.marketplace.app.command.respond_to_show_request_use_case import (
    RespondToShowRequestUseCase,
)
from src.service.marketplace.app.command.send_message_use_case import SendMessageUseCase
from src.service.marketplace.app.interface.i_notification_broadcaster import (
    INotificationBroadcaster,
)
from src.service.marketplace.app.query.get_chat_thread_use_case import GetChatThreadUseCase
from src.service.marketplace.app.query.list_show_requests_use_case import (
    ListShowRequestsUseCase,
)
from src.service.marketplace.domain.entity.show_request_entity import (
    RequestInitiator,
    ShowRequestStatus,
)
from src.service.marketplace.domain.value_object.session import Session
from src.service.marketplace.driven_adapter.sse.notification_broadcaster_impl import chat_channel
from src.service.marketplace.driving_adapter.http_controller.auth.role_auth import (
    get_current_session,
    require_artist_or_venue_owner,
)
from src.service.marketplace.driving_adapter.http_controller.schema.show_request_schema import (
    MessageCreateRequest,
    MessageResponse,
    ShowRequestCreateRequest,
    ShowRequestRespondRequest,
    ShowRequestResponse,
)
from src.service.marketplace.driving_adapter.http_controller.sse_stream import (
    channel_event_source,
)


router = APIRouter()


@router.post('', response_model=ShowRequestResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_show_request(
    request: ShowRequestCreateRequest,
    session: Session = Depends(require_artist_or_venue_owner),
    ensure_artist_use_case: EnsureArtistProfileUseCase = Depends(
        EnsureArtistProfileUseCase.depends
    ),
    use_case: CreateShowRequestUseCase = Depends(CreateShowRequestUseCase.depends),
) -> ShowRequestResponse:
    artist_id = request.artist_id
    if request.initiator == RequestInitiator.ARTIST:
        # An artist's first request may precede their artist record
        artist, _ = await ensure_artist_use_case.ensure(session=session)
        artist_id = artist_id or artist.id
    if artist_id is None:
        raise DomainError('artist_id is required for venue-initiated requests')

    show_request = await use_case.create(
        session=session,
        artist_id=artist_id,
        venue_id=request.venue_id,
        proposed_date=request.proposed_date,
        message=request.message,
        initiator=request.initiator,
    )
    return ShowRequestResponse.model_validate(show_request)


@router.get('', response_model=List[ShowRequestResponse])
@Logger.io
async def list_my_show_requests(
    request_status: Optional[ShowRequestStatus] = Query(None, alias='status'),
    session: Session = Depends(require_artist_or_venue_owner),
    use_case: ListShowRequestsUseCase = Depends(ListShowRequestsUseCase.depends),
) -> List[ShowRequestResponse]:
    show_requests = await use_case.list_my_requests(session=session, status=request_status)
    return [ShowRequestResponse.model_validate(r) for r in show_requests]


@router.get('/{request_id}', response_model=ShowRequestResponse)
@Logger.io
async def get_show_request(
    request_id: int,
    session: Session = Depends(get_current_session),
    use_case: ListShowRequestsUseCase = Depends(ListShowRequestsUseCase.depends),
) -> ShowRequestResponse:
    return ShowRequestResponse.model_validate(
        await use_case.get(request_id=request_id, session=session)
    )


@router.patch('/{request_id}', response_model=ShowRequestResponse)
@Logger.io
async def respond_to_show_request(
    request_id: int,
    request: ShowRequestRespondRequest,
    session: Session = Depends(require_artist_or_venue_owner),
    use_case: RespondToShowRequestUseCase = Depends(RespondToShowRequestUseCase.depends),
) -> ShowRequestResponse:
    show_request = await use_case.respond(
        request_id=request_id, session=session, new_status=request.status
    )
    return ShowRequestResponse.model_validate(show_request)


# ============================ Messaging ============================


@router.get('/{request_id}/message', response_model=List[MessageResponse])
@Logger.io
async def list_messages(
    request_id: int,
    session: Session = Depends(get_current_session),
    use_case: GetChatThreadUseCase = Depends(GetChatThreadUseCase.depends),
) -> List[MessageResponse]:
    messages = await use_case.retrieve(request_id=request_id, viewer_id=session.principal_id)
    return [MessageResponse.model_validate(m) for m in messages]


@router.post(
    '/{request_id}/message', response_model=MessageResponse, status_code=status.HTTP_201_CREATED
)
@Logger.io
async def send_message(
    request_id: int,
    request: MessageCreateRequest,
    session: Session = Depends(get_current_session),
    use_case: SendMessageUseCase = Depends(SendMessageUseCase.depends),
) -> MessageResponse:
    message = await use_case.send(
        request_id=request_id, sender_id=session.principal_id, content=request.content
    )
    return MessageResponse.model_validate(message)


@router.get('/{request_id}/sse', status_code=status.HTTP_200_OK)
@inject
async def stream_messages(
    request_id: int,
    session: Session = Depends(get_current_session),
    chat_use_case: GetChatThreadUseCase = Depends(GetChatThreadUseCase.depends),
    broadcaster: INotificationBroadcaster = Depends(Provide[Container.notification_broadcaster]),
) -> EventSourceResponse:
    """New messages of an accepted request, for its two participants only"""
    await chat_use_case.ensure_access(request_id=request_id, viewer_id=session.principal_id)
    return channel_event_source(broadcaster=broadcaster, channel=chat_channel(request_id))
