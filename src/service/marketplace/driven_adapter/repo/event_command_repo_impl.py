from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.marketplace.domain.entity.event_entity import Event
from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.domain.enum.event_status import EDITABLE_EVENT_STATUSES, EventStatus
from src.service.marketplace.driven_adapter.model.event_model import EventModel
from src.service.marketplace.driven_adapter.model.ticket_model import TicketModel
from src.service.marketplace.driven_adapter.repo.event_query_repo_impl import (
    event_model_to_entity,
    ticket_model_to_entity,
)


class EventCommandRepoImpl(IEventCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create_with_tickets(
        self, *, event: Event, tickets: List[Ticket]
    ) -> tuple[Event, List[Ticket]]:
        async with self.session_factory() as session:
            event_model = EventModel(
                venue_id=event.venue_id,
                artist_id=event.artist_id,
                name=event.name,
                description=event.description,
                event_date=event.event_date,
                duration=event.duration,
                status=event.status.value,
            )
            session.add(event_model)
            await session.flush()  # assigns event_model.id inside the transaction

            ticket_models = [
                TicketModel(
                    event_id=event_model.id,
                    ticket_type=ticket.ticket_type,
                    price=ticket.price,
                    quantity_total=ticket.quantity_total,
                    quantity_remaining=ticket.quantity_total,
                )
                for ticket in tickets
            ]
            session.add_all(ticket_models)
            await session.commit()

            await session.refresh(event_model)
            for ticket_model in ticket_models:
                await session.refresh(ticket_model)

            Logger.base.info(
                f'🎫 [EVENT] Created event {event_model.id} with {len(ticket_models)} ticket types'
            )
            return event_model_to_entity(event_model), [
                ticket_model_to_entity(m) for m in ticket_models
            ]

    @Logger.io
    async def update_details(self, *, event: Event) -> Optional[Event]:
        async with self.session_factory() as session:
            result = await session.execute(
                update(EventModel)
                .where(
                    EventModel.id == event.id,
                    EventModel.status.in_([s.value for s in EDITABLE_EVENT_STATUSES]),
                )
                .values(
                    name=event.name,
                    description=event.description,
                    event_date=event.event_date,
                    duration=event.duration,
                )
                .returning(EventModel)
            )
            event_model = result.scalar_one_or_none()
            await session.commit()

            return event_model_to_entity(event_model) if event_model else None

    @Logger.io
    async def update_status_if(
        self, *, event_id: int, expected: EventStatus, new_status: EventStatus
    ) -> Optional[Event]:
        async with self.session_factory() as session:
            result = await session.execute(
                update(EventModel)
                .where(EventModel.id == event_id, EventModel.status == expected.value)
                .values(status=new_status.value)
                .returning(EventModel)
            )
            event_model = result.scalar_one_or_none()
            await session.commit()

            return event_model_to_entity(event_model) if event_model else None
