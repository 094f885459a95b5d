from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_profile_command_repo import IProfileCommandRepo
from src.service.marketplace.app.interface.i_profile_query_repo import IProfileQueryRepo
from src.service.marketplace.domain.entity.profile_entity import Profile


class UpdateProfileUseCase:
    """Signed-in user edits their own display name and avatar"""

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
    async def update(
        self,
        *,
        profile_id: int,
        full_name: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> Profile:
        profile = await self.profile_query_repo.get_by_id(profile_id=profile_id)
        if not profile:
            raise NotFoundError('Profile not found')

        edited = profile.update_details(full_name=full_name, avatar_url=avatar_url)
        updated = await self.profile_command_repo.update_details(
            profile_id=profile_id, full_name=edited.full_name, avatar_url=edited.avatar_url
        )
        if not updated:
            raise NotFoundError('Profile not found')
        return updated
