from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_venue_command_repo import IVenueCommandRepo
from src.service.marketplace.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.marketplace.domain.entity.venue_entity import Venue


class UpdateVenueUseCase:
    def __init__(
        self, *, venue_query_repo: IVenueQueryRepo, venue_command_repo: IVenueCommandRepo
    ) -> None:
        self.venue_query_repo = venue_query_repo
        self.venue_command_repo = venue_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        venue_query_repo: IVenueQueryRepo = Depends(Provide[Container.venue_query_repo]),
        venue_command_repo: IVenueCommandRepo = Depends(Provide[Container.venue_command_repo]),
    ) -> Self:
        return cls(venue_query_repo=venue_query_repo, venue_command_repo=venue_command_repo)

    @Logger.io
    async def update(
        self,
        *,
        venue_id: int,
        owner_id: int,
        name: Optional[str] = None,
        address: Optional[str] = None,
        capacity: Optional[int] = None,
        amenities: Optional[List[str]] = None,
        images: Optional[List[str]] = None,
        description: Optional[str] = None,
    ) -> Venue:
        venue = await self.venue_query_repo.get_by_id(venue_id=venue_id)
        if not venue:
            raise NotFoundError('Venue not found')
        venue.ensure_owned_by(owner_id)

        updated = venue.update_details(
            name=name,
            address=address,
            capacity=capacity,
            amenities=amenities,
            images=images,
            description=description,
        )
        return await self.venue_command_repo.update(venue=updated)
