"""
Domain value objects package.
"""

from .home_size import HomeSize
from .location import Location
from .request_status import RequestStatus
from .user_role import UserRole

__all__ = [
    "HomeSize",
    "Location",
    "RequestStatus",
    "UserRole",
]
