from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.ensure_artist_profile_use_case import (
    EnsureArtistProfileUseCase,
)
from src.service.marketplace.app.command.update_artist_profile_use_case import (
    UpdateArtistProfileUseCase,
)
from src.service.marketplace.app.query.catalog_query_use_case import ListArtistsUseCase
from src.service.marketplace.domain.value_object.session import Session
from src.service.marketplace.driving_adapter.http_controller.auth.role_auth import (
    require_artist,
)
from src.service.marketplace.driving_adapter.http_controller.schema.catalog_schema import (
    ArtistResponse,
    ArtistUpdateRequest,
    EnsureArtistResponse,
)


router = APIRouter()


@router.put('/me', response_model=EnsureArtistResponse)
@Logger.io
async def ensure_my_artist_profile(
    response: Response,
    session: Session = Depends(require_artist),
    use_case: EnsureArtistProfileUseCase = Depends(EnsureArtistProfileUseCase.depends),
) -> EnsureArtistResponse:
    """Idempotent: 201 when the record was created, 200 when it already existed"""
    artist, created = await use_case.ensure(session=session)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return EnsureArtistResponse(
        **ArtistResponse.model_validate(artist).model_dump(), created=created
    )


@router.patch('/me', response_model=ArtistResponse)
@Logger.io
async def update_my_artist_profile(
    request: ArtistUpdateRequest,
    session: Session = Depends(require_artist),
    use_case: UpdateArtistProfileUseCase = Depends(UpdateArtistProfileUseCase.depends),
) -> ArtistResponse:
    artist = await use_case.update(
        artist_id=session.principal_id, **request.model_dump(exclude_unset=True)
    )
    return ArtistResponse.model_validate(artist)


@router.get('', response_model=List[ArtistResponse])
@Logger.io
async def list_artists(
    genre: Optional[str] = None,
    use_case: ListArtistsUseCase = Depends(ListArtistsUseCase.depends),
) -> List[ArtistResponse]:
    return [ArtistResponse.model_validate(a) for a in await use_case.list_artists(genre=genre)]


@router.get('/{artist_id}', response_model=ArtistResponse)
@Logger.io
async def get_artist(
    artist_id: int,
    use_case: ListArtistsUseCase = Depends(ListArtistsUseCase.depends),
) -> ArtistResponse:
    return ArtistResponse.model_validate(await use_case.get_artist(artist_id=artist_id))
