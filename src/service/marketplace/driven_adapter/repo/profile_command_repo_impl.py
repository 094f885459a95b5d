from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_profile_command_repo import IProfileCommandRepo
from src.service.marketplace.domain.entity.profile_entity import Profile, VerificationStatus
from src.service.marketplace.driven_adapter.model.profile_model import ProfileModel
from src.service.marketplace.driven_adapter.repo.profile_query_repo_impl import (
    profile_model_to_entity,
)


class ProfileCommandRepoImpl(IProfileCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, profile: Profile) -> Profile:
        async with self.session_factory() as session:
            profile_model = ProfileModel(
                email=profile.email,
                hashed_password=profile.hashed_password,
                full_name=profile.full_name,
                avatar_url=profile.avatar_url,
                role=profile.role.value,
                verification_status=profile.verification_status.value,
            )
            session.add(profile_model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if 'ix_profile_email' in str(e) or 'duplicate key' in str(e).lower():
                    raise ConflictError(f'Profile with email {profile.email} already exists') from e
                raise
            await session.refresh(profile_model)

            return profile_model_to_entity(profile_model)

    @Logger.io
    async def update_verification_status(
        self, *, profile_id: int, expected: VerificationStatus, new_status: VerificationStatus
    ) -> Profile | None:
        async with self.session_factory() as session:
            result = await session.execute(
                update(ProfileModel)
                .where(
                    ProfileModel.id == profile_id,
                    ProfileModel.verification_status == expected.value,
                )
                .values(verification_status=new_status.value)
                .returning(ProfileModel)
            )
            profile_model = result.scalar_one_or_none()
            await session.commit()

            if not profile_model:
                return None

            Logger.base.info(
                f'🪪 [VERIFICATION] Profile {profile_id}: {expected.value} -> {new_status.value}'
            )
            return profile_model_to_entity(profile_model)

    @Logger.io
    async def update_details(
        self, *, profile_id: int, full_name: str, avatar_url: Optional[str]
    ) -> Profile | None:
        async with self.session_factory() as session:
            result = await session.execute(
                update(ProfileModel)
                .where(ProfileModel.id == profile_id)
                .values(full_name=full_name, avatar_url=avatar_url)
                .returning(ProfileModel)
            )
            profile_model = result.scalar_one_or_none()
            await session.commit()

            return profile_model_to_entity(profile_model) if profile_model else None
