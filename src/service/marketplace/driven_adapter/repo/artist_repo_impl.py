from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_artist_repo import IArtistRepo
from src.service.marketplace.domain.entity.artist_entity import Artist
from src.service.marketplace.driven_adapter.model.artist_model import ArtistModel


class ArtistRepoImpl(IArtistRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, artist_id: int) -> Optional[Artist]:
        async with self.session_factory() as session:
            result = await session.execute(select(ArtistModel).where(ArtistModel.id == artist_id))
            artist_model = result.scalar_one_or_none()
            return self._model_to_entity(artist_model) if artist_model else None

    @Logger.io
    async def create_if_absent(self, *, artist: Artist) -> tuple[Artist, bool]:
        async with self.session_factory() as session:
            # ON CONFLICT keeps concurrent ensure calls from failing on the primary key
            result = await session.execute(
                insert(ArtistModel)
                .values(
                    id=artist.id,
                    description=artist.description,
                    experience=artist.experience,
                    genres=artist.genres,
                    introduction_video_url=artist.introduction_video_url,
                    rating=artist.rating,
                )
                .on_conflict_do_nothing(index_elements=[ArtistModel.id])
                .returning(ArtistModel.id)
            )
            created = result.scalar_one_or_none() is not None
            await session.commit()

            stored = await session.execute(select(ArtistModel).where(ArtistModel.id == artist.id))
            return self._model_to_entity(stored.scalar_one()), created

    @Logger.io
    async def update(self, *, artist: Artist) -> Artist:
        async with self.session_factory() as session:
            artist_model = await session.get(ArtistModel, artist.id)
            if not artist_model:
                raise NotFoundError('Artist not found')

            artist_model.description = artist.description
            artist_model.experience = artist.experience
            artist_model.genres = artist.genres
            artist_model.introduction_video_url = artist.introduction_video_url
            await session.commit()
            await session.refresh(artist_model)

            return self._model_to_entity(artist_model)

    @Logger.io
    async def list_artists(self, *, genre: Optional[str] = None) -> List[Artist]:
        async with self.session_factory() as session:
            stmt = select(ArtistModel)
            if genre:
                stmt = stmt.where(ArtistModel.genres.any(genre.strip().lower()))
            result = await session.execute(
                stmt.order_by(ArtistModel.rating.desc().nulls_last(), ArtistModel.id)
            )
            return [self._model_to_entity(m) for m in result.scalars().all()]

    @staticmethod
    def _model_to_entity(artist_model: ArtistModel) -> Artist:
        return Artist(
            id=artist_model.id,
            description=artist_model.description,
            experience=artist_model.experience,
            genres=list(artist_model.genres or []),
            introduction_video_url=artist_model.introduction_video_url,
            rating=artist_model.rating,
            created_at=artist_model.created_at,
        )
