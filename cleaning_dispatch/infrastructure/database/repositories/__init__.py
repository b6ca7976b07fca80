"""
Database repositories package.
"""

from .cleaning_request_repository import CleaningRequestRepository
from .profile_repository import ProfileRepository
from .request_assignment_repository import RequestAssignmentRepository
from .transaction_repository import TransactionService

__all__ = [
    "CleaningRequestRepository",
    "ProfileRepository",
    "RequestAssignmentRepository",
    "TransactionService",
]
