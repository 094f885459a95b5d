from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_show_request_query_repo import (
    IShowRequestQueryRepo,
)
from src.service.marketplace.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.marketplace.domain.entity.show_request_entity import (
    ShowRequest,
    ShowRequestStatus,
)
from src.service.marketplace.domain.value_object.session import Session


class ListShowRequestsUseCase:
    def __init__(
        self, *, show_request_query_repo: IShowRequestQueryRepo, venue_query_repo: IVenueQueryRepo
    ) -> None:
        self.show_request_query_repo = show_request_query_repo
        self.venue_query_repo = venue_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        show_request_query_repo: IShowRequestQueryRepo = Depends(
            Provide[Container.show_request_query_repo]
        ),
        venue_query_repo: IVenueQueryRepo = Depends(Provide[Container.venue_query_repo]),
    ) -> Self:
        return cls(show_request_query_repo=show_request_query_repo, venue_query_repo=venue_query_repo)

    @Logger.io
    async def list_my_requests(
        self, *, session: Session, status: Optional[ShowRequestStatus] = None
    ) -> List[ShowRequest]:
        """Artists see their own requests, venue owners those on venues they own"""
        if session.is_artist:
            return await self.show_request_query_repo.list_for_artist(
                artist_id=session.principal_id, status=status
            )
        if session.is_venue_owner:
            return await self.show_request_query_repo.list_for_venue_owner(
                owner_id=session.principal_id, status=status
            )
        return []

    @Logger.io
    async def get(self, *, request_id: int, session: Session) -> ShowRequest:
        show_request = await self.show_request_query_repo.get_by_id(request_id=request_id)
        if not show_request:
            raise NotFoundError('Show request not found')

        venue = await self.venue_query_repo.get_by_id(venue_id=show_request.venue_id)
        if not venue:
            raise NotFoundError('Venue not found')
        # Raises ForbiddenError for non-participants
        show_request.counterpart_of(
            participant_id=session.principal_id, venue_owner_id=venue.owner_id
        )
        return show_request
