"""
Domain exceptions package.
"""

from .authentication_error import NotAuthenticatedError
from .not_found_error import NotFoundError
from .remote_error import RemoteFailure
from .validation_error import (
    AssignmentCountMismatchError,
    DuplicateRecordError,
    InvalidFormatError,
    InvalidInputError,
    RequiredFieldError,
    ValidationError,
)
from .workflow_error import InvalidTransitionError, PermissionDeniedError, WorkflowError

__all__ = [
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
]
