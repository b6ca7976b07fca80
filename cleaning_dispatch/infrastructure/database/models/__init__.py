"""
Database models package.
"""

from .base import Base, BaseModel
from .cleaning_request import CleaningRequestModel
from .profile import ProfileModel
from .request_assignment import RequestAssignmentModel

__all__ = [
    "Base",
    "BaseModel",
    "CleaningRequestModel",
    "ProfileModel",
    "RequestAssignmentModel",
]
