from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.create_venue_use_case import CreateVenueUseCase
from src.service.marketplace.app.command.update_venue_use_case import UpdateVenueUseCase
from src.service.marketplace.app.query.catalog_query_use_case import ListVenuesUseCase
from src.service.marketplace.domain.value_object.session import Session
from src.service.marketplace.driving_adapter.http_controller.auth.role_auth import (
    require_venue_owner,
    require_verified_venue_owner,
)
from src.service.marketplace.driving_adapter.http_controller.schema.catalog_schema import (
    VenueCreateRequest,
    VenueResponse,
    VenueUpdateRequest,
)


router = APIRouter()


@router.post('', response_model=VenueResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_venue(
    request: VenueCreateRequest,
    session: Session = Depends(require_verified_venue_owner),
    use_case: CreateVenueUseCase = Depends(CreateVenueUseCase.depends),
) -> VenueResponse:
    venue = await use_case.create(owner_id=session.principal_id, **request.model_dump())
    return VenueResponse.model_validate(venue)


@router.get('', response_model=List[VenueResponse])
@Logger.io
async def list_venues(
    search: Optional[str] = None,
    min_capacity: Optional[int] = Query(None, gt=0),
    amenity: Optional[str] = None,
    use_case: ListVenuesUseCase = Depends(ListVenuesUseCase.depends),
) -> List[VenueResponse]:
    venues = await use_case.list_venues(search=search, min_capacity=min_capacity, amenity=amenity)
    return [VenueResponse.model_validate(v) for v in venues]


@router.get('/mine', response_model=List[VenueResponse])
@Logger.io
async def list_my_venues(
    session: Session = Depends(require_venue_owner),
    use_case: ListVenuesUseCase = Depends(ListVenuesUseCase.depends),
) -> List[VenueResponse]:
    venues = await use_case.list_venues(owner_id=session.principal_id)
    return [VenueResponse.model_validate(v) for v in venues]


@router.get('/{venue_id}', response_model=VenueResponse)
@Logger.io
async def get_venue(
    venue_id: int,
    use_case: ListVenuesUseCase = Depends(ListVenuesUseCase.depends),
) -> VenueResponse:
    return VenueResponse.model_validate(await use_case.get_venue(venue_id=venue_id))


@router.patch('/{venue_id}', response_model=VenueResponse)
@Logger.io
async def update_venue(
    venue_id: int,
    request: VenueUpdateRequest,
    session: Session = Depends(require_verified_venue_owner),
    use_case: UpdateVenueUseCase = Depends(UpdateVenueUseCase.depends),
) -> VenueResponse:
    venue = await use_case.update(
        venue_id=venue_id,
        owner_id=session.principal_id,
        **request.model_dump(exclude_unset=True),
    )
    return VenueResponse.model_validate(venue)
