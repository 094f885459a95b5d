from datetime import datetime
from enum import StrEnum
from typing import Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import ConflictError, DomainError, LoginError
from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher


class ProfileRole(StrEnum):
    ARTIST = 'artist'
    VENUE_OWNER = 'venue_owner'
    AUDIENCE = 'audience'


class VerificationStatus(StrEnum):
    NONE = 'none'
    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'


REVIEW_DECISIONS = (VerificationStatus.APPROVED, VerificationStatus.REJECTED)


@attrs.define
class Profile:
    email: str = ''
    full_name: str = ''
    role: ProfileRole = ProfileRole.AUDIENCE
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    avatar_url: Optional[str] = None
    verification_status: VerificationStatus = VerificationStatus.NONE
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        email: str,
        full_name: str,
        role: ProfileRole,
        avatar_url: Optional[str] = None,
    ) -> 'Profile':
        """Venue owners enter the review queue at sign-up; other roles are never reviewed."""
        if not full_name or not full_name.strip():
            raise DomainError('full_name cannot be empty')
        try:
            role = ProfileRole(role)
        except ValueError:
            valid_roles = ', '.join(r.value for r in ProfileRole)
            raise DomainError(f'Invalid role: {role}. Must be one of: {valid_roles}')

        return cls(
            email=email,
            full_name=full_name.strip(),
            role=role,
            avatar_url=avatar_url,
            verification_status=(
                VerificationStatus.PENDING
                if role == ProfileRole.VENUE_OWNER
                else VerificationStatus.NONE
            ),
        )

    @staticmethod
    def validate_profile_exists(profile: Optional['Profile']) -> 'Profile':
        if not profile:
            raise LoginError('LOGIN_BAD_CREDENTIALS')
        return profile

    def set_password(self, plain_password: str, password_hasher: IPasswordHasher) -> None:
        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )

    @property
    def is_verified_venue_owner(self) -> bool:
        return (
            self.role == ProfileRole.VENUE_OWNER
            and self.verification_status == VerificationStatus.APPROVED
        )

    def review(self, *, decision: VerificationStatus) -> 'Profile':
        """Administrative decision on a pending venue owner: pending -> approved|rejected"""
        if decision not in REVIEW_DECISIONS:
            raise DomainError('decision must be either "approved" or "rejected"')
        if self.role != ProfileRole.VENUE_OWNER:
            raise ConflictError('Only venue owner profiles are reviewed')
        if self.verification_status != VerificationStatus.PENDING:
            raise ConflictError(
                f'Verification already decided: {self.verification_status.value}'
            )
        return attrs.evolve(self, verification_status=decision)

    def update_details(
        self, *, full_name: Optional[str] = None, avatar_url: Optional[str] = None
    ) -> 'Profile':
        """Self-service edit; an empty avatar_url clears it"""
        changes: dict = {}
        if full_name is not None:
            if not full_name.strip():
                raise DomainError('full_name cannot be empty')
            changes['full_name'] = full_name.strip()
        if avatar_url is not None:
            changes['avatar_url'] = avatar_url.strip() or None
        return attrs.evolve(self, **changes)
