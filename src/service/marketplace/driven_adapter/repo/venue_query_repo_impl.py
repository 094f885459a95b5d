from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import ColumnElement, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.marketplace.domain.entity.venue_entity import Venue
from src.service.marketplace.driven_adapter.model.venue_model import VenueModel


def venue_model_to_entity(venue_model: VenueModel) -> Venue:
    return Venue(
        id=venue_model.id,
        owner_id=venue_model.owner_id,
        name=venue_model.name,
        address=venue_model.address,
        capacity=venue_model.capacity,
        amenities=list(venue_model.amenities or []),
        images=list(venue_model.images or []),
        description=venue_model.description,
        created_at=venue_model.created_at,
    )


def venue_search_clause(search: str) -> ColumnElement[bool]:
    # % and _ typed by the user match literally
    term = search.strip()
    return or_(
        VenueModel.name.icontains(term, autoescape=True),
        VenueModel.address.icontains(term, autoescape=True),
    )


class VenueQueryRepoImpl(IVenueQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, venue_id: int) -> Optional[Venue]:
        async with self.session_factory() as session:
            venue_model = await session.get(VenueModel, venue_id)
            return venue_model_to_entity(venue_model) if venue_model else None

    @Logger.io
    async def list_venues(
        self,
        *,
        search: Optional[str] = None,
        min_capacity: Optional[int] = None,
        amenity: Optional[str] = None,
        owner_id: Optional[int] = None,
    ) -> List[Venue]:
        async with self.session_factory() as session:
            stmt = select(VenueModel)
            if search:
                stmt = stmt.where(venue_search_clause(search))
            if min_capacity is not None:
                stmt = stmt.where(VenueModel.capacity >= min_capacity)
            if amenity:
                stmt = stmt.where(VenueModel.amenities.any(amenity.strip()))
            if owner_id is not None:
                stmt = stmt.where(VenueModel.owner_id == owner_id)

            result = await session.execute(stmt.order_by(VenueModel.name, VenueModel.id))
            return [venue_model_to_entity(m) for m in result.scalars().all()]
