from typing import List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query, status
from opentelemetry import trace
from sse_starlette.sse import EventSourceResponse

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.create_event_with_tickets_use_case import (
    CreateEventWithTicketsUseCase,
)
from src.service.marketplace.app.command.update_event_use_case import UpdateEventUseCase
from src.service.marketplace.app.interface.i_notification_broadcaster import (
    INotificationBroadcaster,
)
from src.service.marketplace.app.query.booking_report_use_case import GetEventStatsUseCase
from src.service.marketplace.app.query.catalog_query_use_case import ListEventsUseCase
from src.service.marketplace.domain.enum.event_status import EventStatus
from src.service.marketplace.domain.value_object.session import Session
from src.service.marketplace.driven_adapter.sse.notification_broadcaster_impl import (
    event_channel,
)
from src.service.marketplace.driving_adapter.http_controller.auth.role_auth import (
    require_verified_venue_owner,
)
from src.service.marketplace.driving_adapter.http_controller.schema.event_schema import (
    EventCreateRequest,
    EventResponse,
    EventStatsResponse,
    EventStatusUpdateRequest,
    EventUpdateRequest,
    EventWithTicketsResponse,
    TicketResponse,
)
from src.service.marketplace.driving_adapter.http_controller.sse_stream import (
    channel_event_source,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', response_model=EventWithTicketsResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    session: Session = Depends(require_verified_venue_owner),
    use_case: CreateEventWithTicketsUseCase = Depends(CreateEventWithTicketsUseCase.depends),
) -> EventWithTicketsResponse:
    with tracer.start_as_current_span('controller.create_event') as span:
        span.set_attribute('venue_id', request.venue_id)
        span.set_attribute('owner_id', session.principal_id)

        event, tickets = await use_case.create(
            owner_id=session.principal_id,
            venue_id=request.venue_id,
            artist_id=request.artist_id,
            name=request.name,
            description=request.description,
            event_date=request.event_date,
            duration=request.duration,
            tickets=[t.model_dump() for t in request.tickets],
            show_request_id=request.show_request_id,
        )
        return EventWithTicketsResponse(
            **EventResponse.model_validate(event).model_dump(),
            tickets=[TicketResponse.model_validate(t) for t in tickets],
        )


@router.get('', response_model=List[EventResponse])
@Logger.io
async def list_events(
    event_status: Optional[EventStatus] = Query(None, alias='status'),
    venue_id: Optional[int] = None,
    artist_id: Optional[int] = None,
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    events = await use_case.list_events(
        status=event_status, venue_id=venue_id, artist_id=artist_id
    )
    return [EventResponse.model_validate(e) for e in events]


@router.get('/{event_id}', response_model=EventWithTicketsResponse)
@Logger.io
async def get_event(
    event_id: int,
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> EventWithTicketsResponse:
    event, tickets = await use_case.get_event_with_tickets(event_id=event_id)
    return EventWithTicketsResponse(
        **EventResponse.model_validate(event).model_dump(),
        tickets=[TicketResponse.model_validate(t) for t in tickets],
    )


@router.patch('/{event_id}', response_model=EventResponse)
@Logger.io
async def update_event(
    event_id: int,
    request: EventUpdateRequest,
    session: Session = Depends(require_verified_venue_owner),
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> EventResponse:
    event = await use_case.update(
        event_id=event_id,
        owner_id=session.principal_id,
        **request.model_dump(exclude_unset=True),
    )
    return EventResponse.model_validate(event)


@router.patch('/{event_id}/status', response_model=EventResponse)
@Logger.io
async def change_event_status(
    event_id: int,
    request: EventStatusUpdateRequest,
    session: Session = Depends(require_verified_venue_owner),
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> EventResponse:
    event = await use_case.change_status(
        event_id=event_id, owner_id=session.principal_id, new_status=request.status
    )
    return EventResponse.model_validate(event)


@router.get('/{event_id}/stats', response_model=EventStatsResponse)
@Logger.io
async def get_event_stats(
    event_id: int,
    session: Session = Depends(require_verified_venue_owner),
    use_case: GetEventStatsUseCase = Depends(GetEventStatsUseCase.depends),
) -> EventStatsResponse:
    stats = await use_case.get_event_stats(event_id=event_id, owner_id=session.principal_id)
    return EventStatsResponse(**stats)


# ============================ SSE Endpoint ============================


@router.get('/{event_id}/sse', status_code=status.HTTP_200_OK)
@inject
async def stream_event_inventory(
    event_id: int,
    broadcaster: INotificationBroadcaster = Depends(Provide[Container.notification_broadcaster]),
) -> EventSourceResponse:
    """Public feed of inventory_changed events: {ticket_id, quantity_remaining}"""
    return channel_event_source(broadcaster=broadcaster, channel=event_channel(event_id))
