"""
Use cases package.

This package contains the business logic use cases that orchestrate
the application services and the request store gateway.
"""

from .assign_employees import AssignEmployeesUseCase
from .create_request import CreateCleaningRequestUseCase
from .list_requests import ListRequestsUseCase
from .register_profile import RegisterProfileUseCase
from .transition_status import TransitionStatusUseCase

__all__ = [
    "AssignEmployeesUseCase",
    "CreateCleaningRequestUseCase",
    "ListRequestsUseCase",
    "RegisterProfileUseCase",
    "TransitionStatusUseCase",
]
