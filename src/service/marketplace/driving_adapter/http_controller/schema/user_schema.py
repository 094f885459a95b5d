"""
User API Schemas - Pydantic models for request/response
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr

from src.service.marketplace.domain.entity.profile_entity import ProfileRole, VerificationStatus


class SignUpRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'email': 'owner@example.com',
                'password': 'P@ssw0rd',
                'full_name': 'Jamie Rivera',
                'role': 'venue_owner',
                'avatar_url': None,
            }
        }
    )

    email: EmailStr
    password: SecretStr = Field(
        ..., min_length=8, max_length=72, description='Password must be 8-72 characters'
    )
    full_name: str = Field(..., min_length=1, max_length=255)
    role: ProfileRole = ProfileRole.AUDIENCE
    avatar_url: Optional[str] = Field(None, max_length=1024)


class LoginRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'email': 'owner@example.com', 'password': 'P@ssw0rd'}}
    )

    email: EmailStr
    password: SecretStr = Field(..., min_length=1, max_length=72)


class ProfileUpdateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {'full_name': 'Jamie Rivera', 'avatar_url': 'https://cdn.example.com/a.png'}
        }
    )

    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    avatar_url: Optional[str] = Field(None, max_length=1024)


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    full_name: str
    role: ProfileRole
    verification_status: VerificationStatus
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None


class SessionResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'principal_id': 1,
                'email': 'owner@example.com',
                'full_name': 'Jamie Rivera',
                'role': 'venue_owner',
                'verification_status': 'approved',
                'profile_loaded': True,
                'unread_messages': 2,
            }
        }
    )

    principal_id: int
    email: str
    full_name: str
    role: ProfileRole
    verification_status: VerificationStatus
    profile_loaded: bool
    unread_messages: int = 0


class ReviewRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={'example': {'decision': 'approved'}})

    decision: VerificationStatus
