from typing import AsyncContextManager, Callable, List, Optional

from pydantic import SecretStr
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher
from src.service.marketplace.app.interface.i_profile_query_repo import IProfileQueryRepo
from src.service.marketplace.domain.entity.profile_entity import (
    Profile,
    ProfileRole,
    VerificationStatus,
)
from src.service.marketplace.driven_adapter.model.profile_model import ProfileModel


def profile_model_to_entity(profile_model: ProfileModel) -> Profile:
    return Profile(
        id=profile_model.id,
        email=profile_model.email,
        full_name=profile_model.full_name,
        avatar_url=profile_model.avatar_url,
        role=ProfileRole(profile_model.role),
        verification_status=VerificationStatus(profile_model.verification_status),
        created_at=profile_model.created_at,
    )


class ProfileQueryRepoImpl(IProfileQueryRepo):
    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]],
        password_hasher: IPasswordHasher,
    ) -> None:
        self.session_factory = session_factory
        self.password_hasher = password_hasher

    @Logger.io
    async def get_by_id(self, *, profile_id: int) -> Optional[Profile]:
        async with self.session_factory() as session:
            result = await session.execute(select(ProfileModel).where(ProfileModel.id == profile_id))
            profile_model = result.scalar_one_or_none()
            return profile_model_to_entity(profile_model) if profile_model else None

    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[Profile]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ProfileModel).where(ProfileModel.email == email)
            )
            profile_model = result.scalar_one_or_none()
            return profile_model_to_entity(profile_model) if profile_model else None

    @Logger.io
    async def verify_password(self, *, email: str, plain_password: str) -> Optional[Profile]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ProfileModel).where(ProfileModel.email == email)
            )
            profile_model = result.scalar_one_or_none()

            if not profile_model:
                return None

            if not self.password_hasher.verify_password(
                plain_password=SecretStr(plain_password),
                hashed_password=profile_model.hashed_password,
            ):
                return None

            return profile_model_to_entity(profile_model)

    @Logger.io
    async def list_by_role(
        self, *, role: ProfileRole, verification_status: Optional[VerificationStatus] = None
    ) -> List[Profile]:
        async with self.session_factory() as session:
            stmt = select(ProfileModel).where(ProfileModel.role == role.value)
            if verification_status is not None:
                stmt = stmt.where(ProfileModel.verification_status == verification_status.value)
            result = await session.execute(stmt.order_by(ProfileModel.created_at, ProfileModel.id))
            return [profile_model_to_entity(m) for m in result.scalars().all()]
