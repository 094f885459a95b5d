"""
Create Event Use Case

An event is created by the verified owner of its venue, optionally by
promoting an accepted show request. The event row and all its ticket
types are written in one transaction by the repository.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_artist_repo import IArtistRepo
from src.service.marketplace.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.marketplace.app.interface.i_show_request_query_repo import (
    IShowRequestQueryRepo,
)
from src.service.marketplace.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.marketplace.domain.entity.event_entity import Event
from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.domain.enum.event_status import EventStatus


class CreateEventWithTicketsUseCase:
    def __init__(
        self,
        *,
        venue_query_repo: IVenueQueryRepo,
        artist_repo: IArtistRepo,
        show_request_query_repo: IShowRequestQueryRepo,
        event_command_repo: IEventCommandRepo,
    ) -> None:
        self.venue_query_repo = venue_query_repo
        self.artist_repo = artist_repo
        self.show_request_query_repo = show_request_query_repo
        self.event_command_repo = event_command_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        venue_query_repo: IVenueQueryRepo = Depends(Provide[Container.venue_query_repo]),
        artist_repo: IArtistRepo = Depends(Provide[Container.artist_repo]),
        show_request_query_repo: IShowRequestQueryRepo = Depends(
            Provide[Container.show_request_query_repo]
        ),
        event_command_repo: IEventCommandRepo = Depends(Provide[Container.event_command_repo]),
    ) -> Self:
        return cls(
            venue_query_repo=venue_query_repo,
            artist_repo=artist_repo,
            show_request_query_repo=show_request_query_repo,
            event_command_repo=event_command_repo,
        )

    @Logger.io
    async def create(
        self,
        *,
        owner_id: int,
        venue_id: int,
        artist_id: int,
        name: str,
        event_date: datetime,
        duration: int = 120,
        description: str = '',
        tickets: Optional[List[Dict[str, Any]]] = None,
        show_request_id: Optional[int] = None,
    ) -> tuple[Event, List[Ticket]]:
        """
        Args:
            tickets: ticket type definitions, each with ticket_type, price, quantity_total

        Raises:
            NotFoundError: venue, artist or show request does not exist
            ForbiddenError: caller does not own the venue
            DomainError: show request is not accepted or names another venue/artist
        """
        with self.tracer.start_as_current_span(
            'use_case.create_event',
            attributes={'venue.id': venue_id, 'artist.id': artist_id},
        ):
            venue = await self.venue_query_repo.get_by_id(venue_id=venue_id)
            if not venue:
                raise NotFoundError('Venue not found')
            venue.ensure_owned_by(owner_id)

            if not await self.artist_repo.get_by_id(artist_id=artist_id):
                raise NotFoundError('Artist not found')

            if show_request_id is not None:
                await self._ensure_promotable(
                    show_request_id=show_request_id, venue_id=venue_id, artist_id=artist_id
                )

            if event_date.tzinfo is None:
                event_date = event_date.replace(tzinfo=timezone.utc)
            event = Event(
                venue_id=venue_id,
                artist_id=artist_id,
                name=name.strip(),
                event_date=event_date,
                duration=duration,
                description=description,
                status=EventStatus.SCHEDULED,
            )
            # event_id is assigned by the repository inside the same transaction
            ticket_entities = [
                Ticket.create(
                    event_id=0,
                    ticket_type=ticket_data['ticket_type'],
                    price=ticket_data['price'],
                    quantity_total=ticket_data['quantity_total'],
                )
                for ticket_data in tickets or []
            ]
            ticket_types = [t.ticket_type for t in ticket_entities]
            if len(set(ticket_types)) != len(ticket_types):
                raise DomainError('Ticket types must be unique within an event')

            created_event, created_tickets = await self.event_command_repo.create_with_tickets(
                event=event, tickets=ticket_entities
            )

            Logger.base.info(
                f'🎉 [EVENT] Venue {venue_id} scheduled event {created_event.id} '
                f'for artist {artist_id} ({len(created_tickets)} ticket types)'
            )
            return created_event, created_tickets

    async def _ensure_promotable(self, *, show_request_id: int, venue_id: int, artist_id: int) -> None:
        show_request = await self.show_request_query_repo.get_by_id(request_id=show_request_id)
        if not show_request:
            raise NotFoundError('Show request not found')
        if not show_request.is_accepted:
            raise DomainError('Only an accepted show request can become an event')
        if show_request.venue_id != venue_id or show_request.artist_id != artist_id:
            raise DomainError('Show request does not match the event venue and artist')
