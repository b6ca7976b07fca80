"""
Profile domain entity.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from cleaning_dispatch.domain.exceptions.validation_error import (
    InvalidFormatError,
    InvalidInputError,
    RequiredFieldError,
)
from cleaning_dispatch.domain.value_objects.user_role import UserRole


@dataclass
class Profile:
    """Identity record of a customer, employee or admin."""

    id: UUID
    email: str
    full_name: str
    role: UserRole
    phone: Optional[str] = None
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self):
        """Validate profile data."""
        if not self.email or not self.email.strip():
            raise RequiredFieldError("email")
        if "@" not in self.email:
            raise InvalidFormatError("email", "name@domain")
        if not self.full_name or not self.full_name.strip():
            raise RequiredFieldError("full_name")
        try:
            self.role = UserRole(self.role)
        except ValueError:
            raise InvalidInputError(
                "role", self.role, ", ".join(r.value for r in UserRole)
            )

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_employee(self) -> bool:
        return self.role == UserRole.EMPLOYEE

    @property
    def is_customer(self) -> bool:
        return self.role == UserRole.CUSTOMER

    def to_dict(self) -> dict:
        """Convert profile to dictionary."""
        return {
            "id": str(self.id),
            "email": self.email,
            "full_name": self.full_name,
            "role": self.role.value,
            "phone": self.phone,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
