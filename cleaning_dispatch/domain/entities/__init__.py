"""
Domain entities package.
"""

from .cleaning_request import CleaningRequest
from .profile import Profile

__all__ = [
    "CleaningRequest",
    "Profile",
]
