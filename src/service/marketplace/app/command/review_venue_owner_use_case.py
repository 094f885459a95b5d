from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_profile_command_repo import IProfileCommandRepo
from src.service.marketplace.app.interface.i_profile_query_repo import IProfileQueryRepo
from src.service.marketplace.domain.entity.profile_entity import Profile, VerificationStatus


class ReviewVenueOwnerUseCase:
    """
    Administrative decision on a venue owner's verification

    pending -> approved | rejected. The status write is conditional on the
    row still being pending, so two reviewers deciding at once cannot both win.
    """

    def __init__(
        self,
        *,
        profile_query_repo: IProfileQueryRepo,
        profile_command_repo: IProfileCommandRepo,
    ) -> None:
        self.profile_query_repo = profile_query_repo
        self.profile_command_repo = profile_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        profile_query_repo: IProfileQueryRepo = Depends(Provide[Container.profile_query_repo]),
        profile_command_repo: IProfileCommandRepo = Depends(
            Provide[Container.profile_command_repo]
        ),
    ) -> Self:
        return cls(
            profile_query_repo=profile_query_repo, profile_command_repo=profile_command_repo
        )

    @Logger.io
    async def review(self, *, profile_id: int, decision: VerificationStatus) -> Profile:
        profile = await self.profile_query_repo.get_by_id(profile_id=profile_id)
        if not profile:
            raise NotFoundError('Profile not found')

        reviewed = profile.review(decision=decision)
        updated = await self.profile_command_repo.update_verification_status(
            profile_id=profile_id,
            expected=VerificationStatus.PENDING,
            new_status=reviewed.verification_status,
        )
        if not updated:
            raise ConflictError('Verification already decided')

        Logger.base.info(f'🪪 [REVIEW] Venue owner {profile_id} -> {decision.value}')
        return updated
