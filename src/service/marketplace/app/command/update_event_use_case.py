from datetime import datetime, timezone
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.marketplace.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.marketplace.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.marketplace.domain.entity.event_entity import Event
from src.service.marketplace.domain.enum.event_status import EventStatus


class UpdateEventUseCase:
    """
    Owner-side event maintenance: detail edits and lifecycle transitions

    Both writes are conditional on the stored status, so a detail edit never
    resurrects a canceled event and two transitions cannot both apply.
    """

    def __init__(
        self,
        *,
        event_query_repo: IEventQueryRepo,
        event_command_repo: IEventCommandRepo,
        venue_query_repo: IVenueQueryRepo,
    ) -> None:
        self.event_query_repo = event_query_repo
        self.event_command_repo = event_command_repo
        self.venue_query_repo = venue_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
        event_command_repo: IEventCommandRepo = Depends(Provide[Container.event_command_repo]),
        venue_query_repo: IVenueQueryRepo = Depends(Provide[Container.venue_query_repo]),
    ) -> Self:
        return cls(
            event_query_repo=event_query_repo,
            event_command_repo=event_command_repo,
            venue_query_repo=venue_query_repo,
        )

    async def _get_owned_event(self, *, event_id: int, owner_id: int) -> Event:
        event = await self.event_query_repo.get_by_id(event_id=event_id)
        if not event:
            raise NotFoundError('Event not found')

        venue = await self.venue_query_repo.get_by_id(venue_id=event.venue_id)
        if not venue:
            raise NotFoundError('Venue not found')
        venue.ensure_owned_by(owner_id)
        return event

    @Logger.io
    async def update(
        self,
        *,
        event_id: int,
        owner_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        event_date: Optional[datetime] = None,
        duration: Optional[int] = None,
    ) -> Event:
        event = await self._get_owned_event(event_id=event_id, owner_id=owner_id)
        if event_date is not None and event_date.tzinfo is None:
            event_date = event_date.replace(tzinfo=timezone.utc)

        updated = event.update_details(
            name=name, description=description, event_date=event_date, duration=duration
        )
        saved = await self.event_command_repo.update_details(event=updated)
        if not saved:
            raise ConflictError('Event was canceled or completed before the update')
        return saved

    @Logger.io
    async def change_status(
        self, *, event_id: int, owner_id: int, new_status: EventStatus
    ) -> Event:
        event = await self._get_owned_event(event_id=event_id, owner_id=owner_id)
        event.change_status(new_status=new_status)  # raises on a disallowed transition
        updated = await self.event_command_repo.update_status_if(
            event_id=event_id, expected=event.status, new_status=new_status
        )
        if not updated:
            raise ConflictError('Event status changed concurrently, reload and retry')

        Logger.base.info(
            f'📅 [EVENT] Event {event_id}: {event.status.value} -> {updated.status.value}'
        )
        return updated
