from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_show_request_query_repo import IShowRequestQueryRepo
from src.service.marketplace.domain.entity.show_request_entity import (
    RequestInitiator,
    ShowRequest,
    ShowRequestStatus,
)
from src.service.marketplace.driven_adapter.model.show_request_model import ShowRequestModel
from src.service.marketplace.driven_adapter.model.venue_model import VenueModel


def show_request_model_to_entity(model: ShowRequestModel) -> ShowRequest:
    return ShowRequest(
        id=model.id,
        artist_id=model.artist_id,
        venue_id=model.venue_id,
        proposed_date=model.proposed_date,
        initiator=RequestInitiator(model.initiator),
        message=model.message,
        status=ShowRequestStatus(model.status),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class ShowRequestQueryRepoImpl(IShowRequestQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, request_id: int) -> Optional[ShowRequest]:
        async with self.session_factory() as session:
            model = await session.get(ShowRequestModel, request_id)
            return show_request_model_to_entity(model) if model else None

    @Logger.io
    async def list_for_artist(
        self, *, artist_id: int, status: Optional[ShowRequestStatus] = None
    ) -> List[ShowRequest]:
        async with self.session_factory() as session:
            stmt = select(ShowRequestModel).where(ShowRequestModel.artist_id == artist_id)
            if status is not None:
                stmt = stmt.where(ShowRequestModel.status == status.value)

            result = await session.execute(
                stmt.order_by(ShowRequestModel.created_at.desc(), ShowRequestModel.id.desc())
            )
            return [show_request_model_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def list_for_venue_owner(
        self, *, owner_id: int, status: Optional[ShowRequestStatus] = None
    ) -> List[ShowRequest]:
        async with self.session_factory() as session:
            stmt = (
                select(ShowRequestModel)
                .join(VenueModel, VenueModel.id == ShowRequestModel.venue_id)
                .where(VenueModel.owner_id == owner_id)
            )
            if status is not None:
                stmt = stmt.where(ShowRequestModel.status == status.value)

            result = await session.execute(
                stmt.order_by(ShowRequestModel.created_at.desc(), ShowRequestModel.id.desc())
            )
            return [show_request_model_to_entity(m) for m in result.scalars().all()]
