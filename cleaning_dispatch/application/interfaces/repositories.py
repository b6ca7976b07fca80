"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID

from cleaning_dispatch.domain.entities.cleaning_request import CleaningRequest
from cleaning_dispatch.domain.entities.profile import Profile
from cleaning_dispatch.domain.value_objects.request_status import RequestStatus
from cleaning_dispatch.domain.value_objects.user_role import UserRole


class CleaningRequestRepositoryInterface(ABC):
    """Cleaning request repository interface."""

    @abstractmethod
    async def create(self, request: CleaningRequest) -> CleaningRequest:
        """Create a new cleaning request."""
        pass

    @abstractmethod
    async def get_by_id(self, request_id: UUID) -> Optional[CleaningRequest]:
        """Get cleaning request by ID."""
        pass

    @abstractmethod
    async def find_all(
        self, statuses: Optional[Iterable[RequestStatus]] = None
    ) -> List[CleaningRequest]:
        """Find all requests, newest first."""
        pass

    @abstractmethod
    async def find_by_customer(
        self, customer_id: UUID, statuses: Optional[Iterable[RequestStatus]] = None
    ) -> List[CleaningRequest]:
        """Find requests owned by a customer, newest first."""
        pass

    @abstractmethod
    async def find_by_employee(
        self, employee_id: UUID, statuses: Optional[Iterable[RequestStatus]] = None
    ) -> List[CleaningRequest]:
        """Find requests assigned to an employee, earliest service date first."""
        pass

    @abstractmethod
    async def update_status(
        self,
        request_id: UUID,
        status: RequestStatus,
        fields: Optional[Dict[str, Any]] = None,
    ) -> CleaningRequest:
        """Persist a status change with its accompanying field changes."""
        pass


class RequestAssignmentRepositoryInterface(ABC):
    """Request assignment repository interface."""

    @abstractmethod
    async def replace_for_request(
        self, request_id: UUID, employee_ids: List[UUID]
    ) -> List[UUID]:
        """Replace the full assignment set of a request."""
        pass

    @abstractmethod
    async def get_employee_ids(self, request_id: UUID) -> List[UUID]:
        """Get employee IDs assigned to a request."""
        pass

    @abstractmethod
    async def get_employee_ids_by_request(
        self, request_ids: Iterable[UUID]
    ) -> Dict[UUID, List[UUID]]:
        """Batched lookup of assigned employee IDs for many requests."""
        pass


class ProfileRepositoryInterface(ABC):
    """Profile repository interface."""

    @abstractmethod
    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        pass

    @abstractmethod
    async def get_by_id(self, profile_id: UUID) -> Optional[Profile]:
        """Get profile by ID."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Profile]:
        """Get profile by email."""
        pass

    @abstractmethod
    async def get_by_ids(self, profile_ids: Iterable[UUID]) -> Dict[UUID, Profile]:
        """Batched lookup of profiles by ID."""
        pass

    @abstractmethod
    async def find_by_role(self, role: UserRole) -> List[Profile]:
        """Find all profiles with a role."""
        pass
