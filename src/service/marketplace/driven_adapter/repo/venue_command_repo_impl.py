from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_venue_command_repo import IVenueCommandRepo
from src.service.marketplace.domain.entity.venue_entity import Venue
from src.service.marketplace.driven_adapter.model.venue_model import VenueModel
from src.service.marketplace.driven_adapter.repo.venue_query_repo_impl import venue_model_to_entity


class VenueCommandRepoImpl(IVenueCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, venue: Venue) -> Venue:
        async with self.session_factory() as session:
            venue_model = VenueModel(
                owner_id=venue.owner_id,
                name=venue.name,
                address=venue.address,
                capacity=venue.capacity,
                amenities=venue.amenities,
                images=venue.images,
                description=venue.description,
            )
            session.add(venue_model)
            await session.commit()
            await session.refresh(venue_model)

            return venue_model_to_entity(venue_model)

    @Logger.io
    async def update(self, *, venue: Venue) -> Venue:
        async with self.session_factory() as session:
            venue_model = await session.get(VenueModel, venue.id)
            if not venue_model:
                raise NotFoundError('Venue not found')

            venue_model.name = venue.name
            venue_model.address = venue.address
            venue_model.capacity = venue.capacity
            venue_model.amenities = venue.amenities
            venue_model.images = venue.images
            venue_model.description = venue.description
            await session.commit()
            await session.refresh(venue_model)

            return venue_model_to_entity(venue_model)
