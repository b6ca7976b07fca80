"""
Cleaning request status value object.
"""

from enum import Enum


class RequestStatus(str, Enum):
    """Cleaning request lifecycle status enumeration."""

    PENDING = "pending"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    def is_final(self) -> bool:
        """Check if status is final (no more transitions)."""
        return self in [self.COMPLETED, self.CANCELLED]

    def is_active(self) -> bool:
        """Check if employees are currently working the request."""
        return self in [self.ASSIGNED, self.IN_PROGRESS]
