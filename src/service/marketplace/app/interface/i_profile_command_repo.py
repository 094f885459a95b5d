from abc import ABC, abstractmethod
from typing import Optional

from src.service.marketplace.domain.entity.profile_entity import Profile, VerificationStatus


class IProfileCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, profile: Profile) -> Profile:
        """Persist a new profile. Raises ConflictError on duplicate email."""
        pass

    @abstractmethod
    async def update_verification_status(
        self, *, profile_id: int, expected: VerificationStatus, new_status: VerificationStatus
    ) -> Profile | None:
        """Compare-and-set; returns None when the stored status is not `expected`."""
        pass

    @abstractmethod
    async def update_details(
        self, *, profile_id: int, full_name: str, avatar_url: Optional[str]
    ) -> Profile | None:
        """Write the self-service fields only; role and verification_status are never touched."""
        pass
