"""
Domain package.
"""

from .entities import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "CleaningRequest",
    "Profile",
    # Exceptions
    "AssignmentCountMismatchError",
    "DuplicateRecordError",
    "InvalidFormatError",
    "InvalidInputError",
    "InvalidTransitionError",
    "NotAuthenticatedError",
    "NotFoundError",
    "PermissionDeniedError",
    "RemoteFailure",
    "RequiredFieldError",
    "ValidationError",
    "WorkflowError",
    # Value Objects
    "HomeSize",
    "Location",
    "RequestStatus",
    "UserRole",
]
