"""
Session token handling

The signed token only carries the principal; role and verification status
are re-derived from the profile on every request (see ResolveSessionUseCase)
so an admin decision takes effect without re-login.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.marketplace.app.interface.i_profile_query_repo import IProfileQueryRepo
from src.service.marketplace.domain.entity.profile_entity import Profile


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    @property
    def max_age_seconds(self) -> int:
        return self.token_expire_minutes * 60

    def create_jwt_token(self, profile: Profile) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(profile.id),
            'exp': now + timedelta(minutes=self.token_expire_minutes),
            'iat': now,
            'user_id': profile.id,
            'email': profile.email,
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid token')

    async def authenticate(
        self, profile_query_repo: IProfileQueryRepo, email: str, password: str
    ) -> Profile:
        profile = await profile_query_repo.verify_password(email=email, plain_password=password)
        return Profile.validate_profile_exists(profile)

    def get_principal_from_jwt(self, token: Optional[str]) -> tuple[int, str]:
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_jwt_token(token)
        user_id = payload.get('user_id')
        email = payload.get('email')
        if not user_id or not email:
            raise AuthenticationError('Invalid token')

        return int(user_id), email
