"""
Role dashboards package.
"""

from .admin import AdminDashboard
from .base import RoleDashboard
from .customer import CustomerDashboard
from .employee import EmployeeDashboard

__all__ = ["AdminDashboard", "CustomerDashboard", "EmployeeDashboard", "RoleDashboard"]
