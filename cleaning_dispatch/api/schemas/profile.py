"""
Profile-related API schemas.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from cleaning_dispatch.domain.entities.profile import Profile
from cleaning_dispatch.domain.value_objects.user_role import UserRole


class ProfileCreateRequest(BaseModel):
    """Profile registration for an identity issued by the auth provider."""

    id: UUID = Field(..., description="Profile id issued by the auth provider")
    email: str = Field(..., max_length=255)
    full_name: str = Field(..., max_length=255)
    role: UserRole = UserRole.CUSTOMER
    phone: Optional[str] = Field(None, max_length=20)


class ProfileResponse(BaseModel):
    """Profile response schema."""

    id: UUID
    email: str
    full_name: str
    role: UserRole
    phone: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            id=profile.id,
            email=profile.email,
            full_name=profile.full_name,
            role=profile.role,
            phone=profile.phone,
            created_at=profile.created_at,
        )
