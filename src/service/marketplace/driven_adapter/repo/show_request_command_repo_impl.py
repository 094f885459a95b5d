from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_show_request_command_repo import (
    IShowRequestCommandRepo,
)
from src.service.marketplace.domain.entity.show_request_entity import (
    ShowRequest,
    ShowRequestStatus,
)
from src.service.marketplace.driven_adapter.model.show_request_model import ShowRequestModel
from src.service.marketplace.driven_adapter.repo.show_request_query_repo_impl import (
    show_request_model_to_entity,
)


class ShowRequestCommandRepoImpl(IShowRequestCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, show_request: ShowRequest) -> ShowRequest:
        async with self.session_factory() as session:
            model = ShowRequestModel(
                artist_id=show_request.artist_id,
                venue_id=show_request.venue_id,
                proposed_date=show_request.proposed_date,
                initiator=show_request.initiator.value,
                message=show_request.message,
                status=show_request.status.value,
            )
            session.add(model)
            await session.commit()
            await session.refresh(model)

            return show_request_model_to_entity(model)

    @Logger.io
    async def update_status_if_pending(
        self, *, request_id: int, new_status: ShowRequestStatus
    ) -> Optional[ShowRequest]:
        async with self.session_factory() as session:
            result = await session.execute(
                update(ShowRequestModel)
                .where(
                    ShowRequestModel.id == request_id,
                    ShowRequestModel.status == ShowRequestStatus.PENDING.value,
                )
                .values(status=new_status.value)
                .returning(ShowRequestModel)
            )
            model = result.scalar_one_or_none()
            await session.commit()

            return show_request_model_to_entity(model) if model else None
