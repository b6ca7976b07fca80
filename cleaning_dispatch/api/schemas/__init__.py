"""
API schemas package.
"""

from .cleaning_request import (
    AssignEmployeesRequest,
    CleaningRequestCreate,
    CleaningRequestDetailResponse,
    CleaningRequestResponse,
    LocationSchema,
    RequestSummaryResponse,
)
from .common import ErrorResponse
from .profile import ProfileCreateRequest, ProfileResponse

__all__ = [
    "AssignEmployeesRequest",
    "CleaningRequestCreate",
    "CleaningRequestDetailResponse",
    "CleaningRequestResponse",
    "ErrorResponse",
    "LocationSchema",
    "ProfileCreateRequest",
    "ProfileResponse",
    "RequestSummaryResponse",
]
