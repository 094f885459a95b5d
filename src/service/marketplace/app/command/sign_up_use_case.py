from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher
from src.service.marketplace.app.interface.i_profile_command_repo import IProfileCommandRepo
from src.service.marketplace.domain.entity.profile_entity import Profile, ProfileRole


MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 72  # bcrypt ignores bytes past 72


class SignUpUseCase:
    def __init__(
        self, *, profile_command_repo: IProfileCommandRepo, password_hasher: IPasswordHasher
    ) -> None:
        self.profile_command_repo = profile_command_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        profile_command_repo: IProfileCommandRepo = Depends(
            Provide[Container.profile_command_repo]
        ),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(profile_command_repo=profile_command_repo, password_hasher=password_hasher)

    @Logger.io
    async def sign_up(
        self,
        *,
        email: str,
        password: str,
        full_name: str,
        role: ProfileRole,
        avatar_url: Optional[str] = None,
    ) -> Profile:
        if not MIN_PASSWORD_LENGTH <= len(password) <= MAX_PASSWORD_LENGTH:
            raise DomainError(
                f'Password must be {MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH} characters'
            )

        profile = Profile.create(
            email=email.strip().lower(), full_name=full_name, role=role, avatar_url=avatar_url
        )
        profile.set_password(password, self.password_hasher)
        created = await self.profile_command_repo.create(profile=profile)

        Logger.base.info(
            f'👤 [SIGN_UP] Profile {created.id} created '
            f'(role={created.role.value}, verification={created.verification_status.value})'
        )
        return created
