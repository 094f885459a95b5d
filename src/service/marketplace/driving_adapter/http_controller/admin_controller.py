"""
Administrative reviewer endpoints

Authenticated by the X-Admin-Token header, never by a user session, so a
venue owner cannot review themselves.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.review_venue_owner_use_case import (
    ReviewVenueOwnerUseCase,
)
from src.service.marketplace.app.query.list_venue_owners_use_case import ListVenueOwnersUseCase
from src.service.marketplace.domain.entity.profile_entity import VerificationStatus
from src.service.marketplace.driving_adapter.http_controller.auth.role_auth import require_admin
from src.service.marketplace.driving_adapter.http_controller.schema.user_schema import (
    ProfileResponse,
    ReviewRequest,
)


router = APIRouter(dependencies=[Depends(require_admin)])


@router.get('/venue_owner', response_model=List[ProfileResponse])
@Logger.io
async def list_venue_owners(
    verification_status: Optional[VerificationStatus] = None,
    use_case: ListVenueOwnersUseCase = Depends(ListVenueOwnersUseCase.depends),
) -> List[ProfileResponse]:
    profiles = await use_case.list_venue_owners(verification_status=verification_status)
    return [ProfileResponse.model_validate(p) for p in profiles]


@router.post('/venue_owner/{profile_id}/review', response_model=ProfileResponse)
@Logger.io
async def review_venue_owner(
    profile_id: int,
    request: ReviewRequest,
    use_case: ReviewVenueOwnerUseCase = Depends(ReviewVenueOwnerUseCase.depends),
) -> ProfileResponse:
    profile = await use_case.review(profile_id=profile_id, decision=request.decision)
    return ProfileResponse.model_validate(profile)
