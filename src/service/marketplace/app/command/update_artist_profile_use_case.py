from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_artist_repo import IArtistRepo
from src.service.marketplace.domain.entity.artist_entity import Artist


class UpdateArtistProfileUseCase:
    def __init__(self, *, artist_repo: IArtistRepo) -> None:
        self.artist_repo = artist_repo

    @classmethod
    @inject
    def depends(
        cls, artist_repo: IArtistRepo = Depends(Provide[Container.artist_repo])
    ) -> Self:
        return cls(artist_repo=artist_repo)

    @Logger.io
    async def update(
        self,
        *,
        artist_id: int,
        description: Optional[str] = None,
        experience: Optional[str] = None,
        genres: Optional[List[str]] = None,
        introduction_video_url: Optional[str] = None,
    ) -> Artist:
        artist = await self.artist_repo.get_by_id(artist_id=artist_id)
        if not artist:
            raise NotFoundError('Artist profile not found')

        updated = artist.update_details(
            description=description,
            experience=experience,
            genres=genres,
            introduction_video_url=introduction_video_url,
        )
        return await self.artist_repo.update(artist=updated)
