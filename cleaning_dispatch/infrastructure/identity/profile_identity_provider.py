"""
Identity provider backed by the profiles table.

The hosted auth provider authenticates the user and forwards the profile id;
this provider only checks that the id is well formed and registered.
"""

from typing import Optional
from uuid import UUID

from cleaning_dispatch.application.interfaces.identity import IdentityProviderInterface
from cleaning_dispatch.application.interfaces.repositories import (
    ProfileRepositoryInterface,
)
from cleaning_dispatch.config.logging import get_logger
from cleaning_dispatch.domain.entities.profile import Profile
from cleaning_dispatch.domain.exceptions.authentication_error import (
    NotAuthenticatedError,
)
from cleaning_dispatch.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


class ProfileIdentityProvider(IdentityProviderInterface):
    """Resolves a forwarded profile id to a registered profile."""

    def __init__(
        self,
        profile_repo: ProfileRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.profile_repo = profile_repo
        self.transaction_service = transaction_service

    async def resolve(self, credential: Optional[str]) -> Profile:
        if not credential or not credential.strip():
            raise NotAuthenticatedError()

        try:
            profile_id = UUID(credential.strip())
        except ValueError:
            logger.warning("Malformed profile id in identity header")
            raise NotAuthenticatedError("Malformed profile id")

        profile = await self.transaction_service.read(
            lambda: self.profile_repo.get_by_id(profile_id), name="resolve_identity"
        )
        if profile is None:
            logger.warning("Unknown profile id", profile_id=str(profile_id))
            raise NotAuthenticatedError("Profile is not registered")
        return profile
