from datetime import datetime
from typing import Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_artist_repo import IArtistRepo
from src.service.marketplace.app.interface.i_notification_broadcaster import (
    INotificationBroadcaster,
)
from src.service.marketplace.app.interface.i_show_request_command_repo import (
    IShowRequestCommandRepo,
)
from src.service.marketplace.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.marketplace.domain.entity.show_request_entity import (
    RequestInitiator,
    ShowRequest,
)
from src.service.marketplace.domain.enum.notification_type import NotificationType
from src.service.marketplace.domain.value_object.session import Session


class CreateShowRequestUseCase:
    """
    Open a performance request between an artist and a venue

    The artist record must already exist; callers that may be creating the
    artist's first request run EnsureArtistProfileUseCase beforehand.
    """

    def __init__(
        self,
        *,
        artist_repo: IArtistRepo,
        venue_query_repo: IVenueQueryRepo,
        show_request_command_repo: IShowRequestCommandRepo,
        notification_broadcaster: INotificationBroadcaster,
    ) -> None:
        self.artist_repo = artist_repo
        self.venue_query_repo = venue_query_repo
        self.show_request_command_repo = show_request_command_repo
        self.notification_broadcaster = notification_broadcaster

    @classmethod
    @inject
    def depends(
        cls,
        artist_repo: IArtistRepo = Depends(Provide[Container.artist_repo]),
        venue_query_repo: IVenueQueryRepo = Depends(Provide[Container.venue_query_repo]),
        show_request_command_repo: IShowRequestCommandRepo = Depends(
            Provide[Container.show_request_command_repo]
        ),
        notification_broadcaster: INotificationBroadcaster = Depends(
            Provide[Container.notification_broadcaster]
        ),
    ) -> Self:
        return cls(
            artist_repo=artist_repo,
            venue_query_repo=venue_query_repo,
            show_request_command_repo=show_request_command_repo,
            notification_broadcaster=notification_broadcaster,
        )

    @Logger.io
    async def create(
        self,
        *,
        session: Session,
        artist_id: int,
        venue_id: int,
        proposed_date: datetime,
        message: str = '',
        initiator: RequestInitiator = RequestInitiator.ARTIST,
    ) -> ShowRequest:
        if not await self.artist_repo.get_by_id(artist_id=artist_id):
            raise NotFoundError('Artist not found')

        venue = await self.venue_query_repo.get_by_id(venue_id=venue_id)
        if not venue:
            raise NotFoundError('Venue not found')

        if initiator == RequestInitiator.ARTIST:
            if not session.is_artist or session.principal_id != artist_id:
                raise ForbiddenError('Only the artist can send this request')
        else:
            if not session.is_venue_owner or session.principal_id != venue.owner_id:
                raise ForbiddenError('Only the venue owner can send this request')

        show_request = ShowRequest.create(
            artist_id=artist_id,
            venue_id=venue_id,
            proposed_date=proposed_date,
            message=message,
            initiator=initiator,
        )
        created = await self.show_request_command_repo.create(show_request=show_request)
        metrics.show_request_transitions.labels(status=created.status.value).inc()

        Logger.base.info(
            f'📨 [REQUEST] {initiator.value} opened request {created.id} '
            f'(artist={artist_id}, venue={venue_id})'
        )

        payload = attrs.asdict(created)
        for participant_id in created.participant_ids(venue_owner_id=venue.owner_id):
            await self.notification_broadcaster.notify_user(
                user_id=participant_id,
                event_type=NotificationType.REQUEST_CREATED,
                payload=payload,
            )
        return created
