"""
Prometheus metrics for system monitoring.
"""

import os

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
    multiprocess,
)

from cleaning_dispatch.config.logging import get_logger

logger = get_logger(__name__)

registry = CollectorRegistry()

prometheus_multiproc_dir = os.getenv("PROMETHEUS_MULTIPROC_DIR")
if prometheus_multiproc_dir and os.path.isdir(prometheus_multiproc_dir):
    multiprocess.MultiProcessCollector(registry)


def get_registry() -> CollectorRegistry:
    """Get the registry all metrics are bound to."""
    return registry


REQUESTS_CREATED = Counter(
    "cleaning_requests_created_total",
    "Total number of cleaning requests created",
    ["home_size", "employee_count"],
    registry=registry,
)

STATUS_TRANSITIONS = Counter(
    "cleaning_request_transitions_total",
    "Total number of applied status transitions",
    ["transition", "actor", "target"],
    registry=registry,
)

EMPLOYEES_ASSIGNED = Counter(
    "cleaning_request_employees_assigned_total",
    "Total number of employee assignments written",
    registry=registry,
)

REJECTED_COMMANDS = Counter(
    "cleaning_request_rejected_commands_total",
    "Commands rejected by validation or the workflow",
    ["error_type"],
    registry=registry,
)

STORE_FAILURES = Counter(
    "store_failures_total",
    "Store operations that failed",
    ["operation"],
    registry=registry,
)

API_REQUEST_DURATION = Histogram(
    "api_request_duration_seconds",
    "Time spent processing API requests",
    ["method", "status_code"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0],
    registry=registry,
)


def record_request_created(home_size: str, employee_count: int) -> None:
    REQUESTS_CREATED.labels(home_size=home_size, employee_count=str(employee_count)).inc()


def record_status_transition(transition: str, actor: str, target: str) -> None:
    STATUS_TRANSITIONS.labels(transition=transition, actor=actor, target=target).inc()


def record_assignment(employee_count: int) -> None:
    EMPLOYEES_ASSIGNED.inc(employee_count)


def record_rejected_command(error_type: str) -> None:
    REJECTED_COMMANDS.labels(error_type=error_type).inc()


def record_store_failure(operation: str) -> None:
    STORE_FAILURES.labels(operation=operation).inc()


def record_api_request(method: str, status_code: int, duration: float) -> None:
    API_REQUEST_DURATION.labels(method=method, status_code=str(status_code)).observe(
        duration
    )


def get_metrics() -> bytes:
    """Get Prometheus metrics in text format."""
    return generate_latest(registry)


def get_metrics_content_type() -> str:
    """Get Prometheus metrics content type."""
    return CONTENT_TYPE_LATEST
