"""
API routes package.
"""

from .admin import router as admin_router
from .customer import router as customer_router
from .employee import router as employee_router
from .health import router as health_router
from .profiles import router as profiles_router

__all__ = [
    "admin_router",
    "customer_router",
    "employee_router",
    "health_router",
    "profiles_router",
]
