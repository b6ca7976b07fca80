"""
Application interfaces package.
"""

from .identity import IdentityProviderInterface
from .repositories import (
    CleaningRequestRepositoryInterface,
    ProfileRepositoryInterface,
    RequestAssignmentRepositoryInterface,
)

__all__ = [
    "CleaningRequestRepositoryInterface",
    "IdentityProviderInterface",
    "ProfileRepositoryInterface",
    "RequestAssignmentRepositoryInterface",
]
