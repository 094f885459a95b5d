from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_artist_repo import IArtistRepo
from src.service.marketplace.domain.entity.artist_entity import Artist
from src.service.marketplace.domain.value_object.session import Session


class EnsureArtistProfileUseCase:
    """Create the caller's Artist record with empty defaults unless it already exists"""

    def __init__(self, *, artist_repo: IArtistRepo) -> None:
        self.artist_repo = artist_repo

    @classmethod
    @inject
    def depends(
        cls, artist_repo: IArtistRepo = Depends(Provide[Container.artist_repo])
    ) -> Self:
        return cls(artist_repo=artist_repo)

    @Logger.io
    async def ensure(self, *, session: Session) -> tuple[Artist, bool]:
        if not session.is_artist:
            raise ForbiddenError('Only artists have an artist profile')

        artist, created = await self.artist_repo.create_if_absent(
            artist=Artist.empty(artist_id=session.principal_id)
        )
        if created:
            Logger.base.info(f'🎤 [ARTIST] Created artist profile {artist.id}')
        return artist, created
