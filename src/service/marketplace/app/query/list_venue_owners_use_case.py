from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_profile_query_repo import IProfileQueryRepo
from src.service.marketplace.domain.entity.profile_entity import (
    Profile,
    ProfileRole,
    VerificationStatus,
)


class ListVenueOwnersUseCase:
    def __init__(self, *, profile_query_repo: IProfileQueryRepo) -> None:
        self.profile_query_repo = profile_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        profile_query_repo: IProfileQueryRepo = Depends(Provide[Container.profile_query_repo]),
    ) -> Self:
        return cls(profile_query_repo=profile_query_repo)

    @Logger.io
    async def list_venue_owners(
        self, *, verification_status: Optional[VerificationStatus] = None
    ) -> List[Profile]:
        return await self.profile_query_repo.list_by_role(
            role=ProfileRole.VENUE_OWNER, verification_status=verification_status
        )
