from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.marketplace.domain.entity.profile_entity import (
    Profile,
    ProfileRole,
    VerificationStatus,
)


class IProfileQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, profile_id: int) -> Optional[Profile]:
        pass

    @abstractmethod
    async def get_by_email(self, *, email: str) -> Optional[Profile]:
        pass

    @abstractmethod
    async def verify_password(self, *, email: str, plain_password: str) -> Optional[Profile]:
        pass

    @abstractmethod
    async def list_by_role(
        self, *, role: ProfileRole, verification_status: Optional[VerificationStatus] = None
    ) -> List[Profile]:
        pass
