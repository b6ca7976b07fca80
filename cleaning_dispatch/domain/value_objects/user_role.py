"""
User role value object.
"""

from enum import Enum


class UserRole(str, Enum):
    """Profile role enumeration."""

    ADMIN = "admin"
    EMPLOYEE = "employee"
    CUSTOMER = "customer"
