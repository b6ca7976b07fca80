"""
Profile repository implementation.
"""

from typing import Dict, Iterable, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cleaning_dispatch.application.interfaces.repositories import (
    ProfileRepositoryInterface,
)
from cleaning_dispatch.domain.entities.profile import Profile
from cleaning_dispatch.domain.value_objects.user_role import UserRole
from cleaning_dispatch.infrastructure.database.models.profile import ProfileModel


class ProfileRepository(ProfileRepositoryInterface):
    """Profile repository implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = ProfileModel(
            id=profile.id,
            email=profile.email,
            full_name=profile.full_name,
            role=profile.role.value,
            phone=profile.phone,
            created_at=profile.created_at,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)

    async def get_by_id(self, profile_id: UUID) -> Optional[Profile]:
        """Get profile by ID."""
        result = await self.session.execute(
            select(ProfileModel).where(ProfileModel.id == profile_id)
        )
        model = result.scalar_one_or_none()
        return self._model_to_entity(model) if model else None

    async def get_by_email(self, email: str) -> Optional[Profile]:
        """Get profile by email."""
        result = await self.session.execute(
            select(ProfileModel).where(ProfileModel.email == email)
        )
        model = result.scalar_one_or_none()
        return self._model_to_entity(model) if model else None

    async def get_by_ids(self, profile_ids: Iterable[UUID]) -> Dict[UUID, Profile]:
        """Batched lookup of profiles by ID."""
        profile_ids = set(profile_ids)
        if not profile_ids:
            return {}

        result = await self.session.execute(
            select(ProfileModel).where(ProfileModel.id.in_(profile_ids))
        )
        return {
            model.id: self._model_to_entity(model)
            for model in result.scalars().all()
        }

    async def find_by_role(self, role: UserRole) -> List[Profile]:
        """Find all profiles with a role."""
        result = await self.session.execute(
            select(ProfileModel)
            .where(ProfileModel.role == UserRole(role).value)
            .order_by(ProfileModel.full_name)
        )
        return [self._model_to_entity(model) for model in result.scalars().all()]

    @staticmethod
    def _model_to_entity(model: ProfileModel) -> Profile:
        return Profile(
            id=model.id,
            email=model.email,
            full_name=model.full_name,
            role=model.role,
            phone=model.phone,
            created_at=model.created_at,
        )
