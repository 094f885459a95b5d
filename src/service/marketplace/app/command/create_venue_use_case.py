from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_venue_command_repo import IVenueCommandRepo
from src.service.marketplace.domain.entity.venue_entity import Venue


class CreateVenueUseCase:
    def __init__(self, *, venue_command_repo: IVenueCommandRepo) -> None:
        self.venue_command_repo = venue_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        venue_command_repo: IVenueCommandRepo = Depends(Provide[Container.venue_command_repo]),
    ) -> Self:
        return cls(venue_command_repo=venue_command_repo)

    @Logger.io
    async def create(
        self,
        *,
        owner_id: int,
        name: str,
        address: str,
        capacity: int,
        amenities: Optional[List[str]] = None,
        images: Optional[List[str]] = None,
        description: str = '',
    ) -> Venue:
        venue = Venue(
            owner_id=owner_id,
            name=name,
            address=address,
            capacity=capacity,
            amenities=amenities or [],
            images=images or [],
            description=description,
        )
        created = await self.venue_command_repo.create(venue=venue)

        Logger.base.info(f'🏟️ [VENUE] Owner {owner_id} created venue {created.id}')
        return created
