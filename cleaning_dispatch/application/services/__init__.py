"""
Application services package.
"""

from .pricing_calculator import PricingCalculator, calculate_price
from .request_filters import (
    FilterScope,
    RequestFilter,
    RequestSummary,
    ensure_can_act_on,
    filter_for_session,
    statuses_for_bucket,
    summarize,
)
from .request_store_gateway import RequestDetails, RequestStoreGateway
from .status_workflow import StatusChange, StatusWorkflowEngine, Transition, WorkflowPolicy

__all__ = [
    "FilterScope",
    "PricingCalculator",
    "RequestDetails",
    "RequestFilter",
    "RequestStoreGateway",
    "RequestSummary",
    "StatusChange",
    "StatusWorkflowEngine",
    "Transition",
    "WorkflowPolicy",
    "calculate_price",
    "ensure_can_act_on",
    "filter_for_session",
    "statuses_for_bucket",
    "summarize",
]
