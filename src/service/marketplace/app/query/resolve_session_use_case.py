from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_profile_query_repo import IProfileQueryRepo
from src.service.marketplace.domain.value_object.session import Session


class ResolveSessionUseCase:
    """
    Principal -> Session, re-derived on every request

    Fails open: when the profile store errors or has no row for the
    principal, the caller still gets a session with audience capabilities
    and `profile_loaded=False`. Browsing keeps working; booking requires a
    loaded profile (RoleAuthStrategy.can_book_tickets).
    """

    def __init__(self, *, profile_query_repo: IProfileQueryRepo) -> None:
        self.profile_query_repo = profile_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        profile_query_repo: IProfileQueryRepo = Depends(Provide[Container.profile_query_repo]),
    ) -> Self:
        return cls(profile_query_repo=profile_query_repo)

    async def resolve(self, *, principal_id: int, email: str) -> Session:
        try:
            profile = await self.profile_query_repo.get_by_id(profile_id=principal_id)
        except Exception as e:
            Logger.base.warning(
                f'⚠️ [SESSION] Profile lookup failed for {principal_id}, '
                f'continuing with reduced session: {type(e).__name__}: {e}'
            )
            return Session.degraded(principal_id=principal_id, email=email)

        if not profile:
            Logger.base.warning(
                f'⚠️ [SESSION] No profile for principal {principal_id}, continuing with reduced session'
            )
            return Session.degraded(principal_id=principal_id, email=email)

        return Session.from_profile(profile)
