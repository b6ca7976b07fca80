"""
Identity provider interface for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import Optional

from cleaning_dispatch.domain.entities.profile import Profile


class IdentityProviderInterface(ABC):
    """Resolves the caller forwarded by the hosted auth provider to a profile."""

    @abstractmethod
    async def resolve(self, credential: Optional[str]) -> Profile:
        """Return the signed-in profile or raise NotAuthenticatedError."""
        pass
