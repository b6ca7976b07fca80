"""
Monitoring package.
"""

from .health_checks import HealthChecker, HealthStatus
from .metrics import (
    get_metrics,
    get_metrics_content_type,
    record_api_request,
    record_assignment,
    record_rejected_command,
    record_request_created,
    record_status_transition,
    record_store_failure,
)

__all__ = [
    "HealthChecker",
    "HealthStatus",
    "get_metrics",
    "get_metrics_content_type",
    "record_api_request",
    "record_assignment",
    "record_rejected_command",
    "record_request_created",
    "record_status_transition",
    "record_store_failure",
]
