from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.marketplace.domain.entity.event_entity import Event
from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.domain.enum.event_status import EventStatus
from src.service.marketplace.driven_adapter.model.event_model import EventModel
from src.service.marketplace.driven_adapter.model.ticket_model import TicketModel


def event_model_to_entity(event_model: EventModel) -> Event:
    return Event(
        id=event_model.id,
        venue_id=event_model.venue_id,
        artist_id=event_model.artist_id,
        name=event_model.name,
        description=event_model.description,
        event_date=event_model.event_date,
        duration=event_model.duration,
        status=EventStatus(event_model.status),
        created_at=event_model.created_at,
        updated_at=event_model.updated_at,
    )


def ticket_model_to_entity(ticket_model: TicketModel) -> Ticket:
    return Ticket(
        id=ticket_model.id,
        event_id=ticket_model.event_id,
        ticket_type=ticket_model.ticket_type,
        price=ticket_model.price,
        quantity_total=ticket_model.quantity_total,
        quantity_remaining=ticket_model.quantity_remaining,
        created_at=ticket_model.created_at,
    )


class EventQueryRepoImpl(IEventQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> Optional[Event]:
        async with self.session_factory() as session:
            event_model = await session.get(EventModel, event_id)
            return event_model_to_entity(event_model) if event_model else None

    @Logger.io
    async def list_events(
        self,
        *,
        status: Optional[EventStatus] = None,
        venue_id: Optional[int] = None,
        artist_id: Optional[int] = None,
    ) -> List[Event]:
        async with self.session_factory() as session:
            stmt = select(EventModel)
            if status is not None:
                stmt = stmt.where(EventModel.status == status.value)
            if venue_id is not None:
                stmt = stmt.where(EventModel.venue_id == venue_id)
            if artist_id is not None:
                stmt = stmt.where(EventModel.artist_id == artist_id)

            result = await session.execute(stmt.order_by(EventModel.event_date, EventModel.id))
            return [event_model_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def list_tickets(self, *, event_id: int) -> List[Ticket]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TicketModel)
                .where(TicketModel.event_id == event_id)
                .order_by(TicketModel.price, TicketModel.id)
            )
            return [ticket_model_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def get_ticket(self, *, ticket_id: int) -> Optional[Ticket]:
        async with self.session_factory() as session:
            ticket_model = await session.get(TicketModel, ticket_id)
            return ticket_model_to_entity(ticket_model) if ticket_model else None
