"""
Catalog read side: venues, artists, events with their tickets
"""

from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_artist_repo import IArtistRepo
from src.service.marketplace.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.marketplace.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.marketplace.domain.entity.artist_entity import Artist
from src.service.marketplace.domain.entity.event_entity import Event
from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.domain.entity.venue_entity import Venue
from src.service.marketplace.domain.enum.event_status import EventStatus


class ListVenuesUseCase:
    def __init__(self, *, venue_query_repo: IVenueQueryRepo) -> None:
        self.venue_query_repo = venue_query_repo

    @classmethod
    @inject
    def depends(
        cls, venue_query_repo: IVenueQueryRepo = Depends(Provide[Container.venue_query_repo])
    ) -> Self:
        return cls(venue_query_repo=venue_query_repo)

    @Logger.io
    async def list_venues(
        self,
        *,
        search: Optional[str] = None,
        min_capacity: Optional[int] = None,
        amenity: Optional[str] = None,
        owner_id: Optional[int] = None,
    ) -> List[Venue]:
        return await self.venue_query_repo.list_venues(
            search=search.strip() if search else None,
            min_capacity=min_capacity,
            amenity=amenity.strip() if amenity else None,
            owner_id=owner_id,
        )

    @Logger.io
    async def get_venue(self, *, venue_id: int) -> Venue:
        venue = await self.venue_query_repo.get_by_id(venue_id=venue_id)
        if not venue:
            raise NotFoundError('Venue not found')
        return venue


class ListArtistsUseCase:
    def __init__(self, *, artist_repo: IArtistRepo) -> None:
        self.artist_repo = artist_repo

    @classmethod
    @inject
    def depends(
        cls, artist_repo: IArtistRepo = Depends(Provide[Container.artist_repo])
    ) -> Self:
        return cls(artist_repo=artist_repo)

    @Logger.io
    async def list_artists(self, *, genre: Optional[str] = None) -> List[Artist]:
        return await self.artist_repo.list_artists(
            genre=genre.strip().lower() if genre else None
        )

    @Logger.io
    async def get_artist(self, *, artist_id: int) -> Artist:
        artist = await self.artist_repo.get_by_id(artist_id=artist_id)
        if not artist:
            raise NotFoundError('Artist not found')
        return artist


class ListEventsUseCase:
    def __init__(self, *, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls, event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo])
    ) -> Self:
        return cls(event_query_repo=event_query_repo)

    @Logger.io
    async def list_events(
        self,
        *,
        status: Optional[EventStatus] = None,
        venue_id: Optional[int] = None,
        artist_id: Optional[int] = None,
    ) -> List[Event]:
        events = await self.event_query_repo.list_events(
            status=status, venue_id=venue_id, artist_id=artist_id
        )
        Logger.base.info(f'📋 [LIST_EVENTS] Found {len(events)} events (status={status})')
        return events

    @Logger.io
    async def get_event_with_tickets(self, *, event_id: int) -> tuple[Event, List[Ticket]]:
        event = await self.event_query_repo.get_by_id(event_id=event_id)
        if not event:
            raise NotFoundError('Event not found')
        tickets = await self.event_query_repo.list_tickets(event_id=event_id)
        return event, tickets
