"""
Session - the resolved view of an authenticated principal

Passed explicitly into controllers and use cases; rebuilt on every request
from the signed session token plus a profile lookup.
"""

import attrs

from src.service.marketplace.domain.entity.profile_entity import (
    Profile,
    ProfileRole,
    VerificationStatus,
)


@attrs.frozen
class Session:
    principal_id: int
    email: str
    role: ProfileRole = ProfileRole.AUDIENCE
    verification_status: VerificationStatus = VerificationStatus.NONE
    full_name: str = ''
    profile_loaded: bool = True

    @classmethod
    def from_profile(cls, profile: Profile) -> 'Session':
        return cls(
            principal_id=profile.id or 0,
            email=profile.email,
            role=profile.role,
            verification_status=profile.verification_status,
            full_name=profile.full_name,
        )

    @classmethod
    def degraded(cls, *, principal_id: int, email: str) -> 'Session':
        """Reduced-capability session used when the profile cannot be loaded"""
        return cls(principal_id=principal_id, email=email, profile_loaded=False)

    @property
    def is_artist(self) -> bool:
        return self.role == ProfileRole.ARTIST

    @property
    def is_audience(self) -> bool:
        return self.role == ProfileRole.AUDIENCE

    @property
    def is_venue_owner(self) -> bool:
        return self.role == ProfileRole.VENUE_OWNER

    @property
    def is_verified_venue_owner(self) -> bool:
        return self.is_venue_owner and self.verification_status == VerificationStatus.APPROVED
