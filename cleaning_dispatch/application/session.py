"""
Explicit session context for the signed-in profile.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from cleaning_dispatch.config.logging import get_logger
from cleaning_dispatch.domain.entities.profile import Profile
from cleaning_dispatch.domain.exceptions.authentication_error import (
    NotAuthenticatedError,
)
from cleaning_dispatch.domain.value_objects.user_role import UserRole

logger = get_logger(__name__)


@dataclass(frozen=True)
class SessionContext:
    """Who is acting. Passed explicitly into dashboards and use cases."""

    profile: Profile
    signed_in_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def profile_id(self) -> UUID:
        return self.profile.id

    @property
    def role(self) -> UserRole:
        return self.profile.role


class SessionManager:
    """Holds at most one SessionContext between sign-in and sign-out."""

    def __init__(self):
        self._context: Optional[SessionContext] = None

    @property
    def current(self) -> SessionContext:
        """The active context; raises NotAuthenticatedError when signed out."""
        if self._context is None:
            raise NotAuthenticatedError()
        return self._context

    def sign_in(self, profile: Profile) -> SessionContext:
        if self._context is not None:
            logger.info(
                "Replacing active session",
                previous_profile_id=str(self._context.profile_id),
                profile_id=str(profile.id),
            )
        self._context = SessionContext(profile=profile)
        logger.debug("Signed in", profile_id=str(profile.id), role=profile.role.value)
        return self._context

    def sign_out(self) -> None:
        if self._context is not None:
            logger.debug("Signed out", profile_id=str(self._context.profile_id))
        self._context = None
