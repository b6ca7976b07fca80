"""List requests use case."""

from typing import List, Optional

from cleaning_dispatch.application.services.request_filters import (
    RequestSummary,
    filter_for_session,
    statuses_for_bucket,
    summarize,
)
from cleaning_dispatch.application.services.request_store_gateway import (
    RequestDetails,
    RequestStoreGateway,
)
from cleaning_dispatch.application.session import SessionContext


class ListRequestsUseCase:
    """Use case for the request list each role sees."""

    def __init__(self, gateway: RequestStoreGateway):
        self.gateway = gateway

    async def execute(
        self, context: SessionContext, status_filter: Optional[str] = None
    ) -> List[RequestDetails]:
        """List the caller's requests, optionally narrowed to a dashboard tab."""
        request_filter = filter_for_session(context, statuses_for_bucket(status_filter))
        return await self.gateway.list_requests(request_filter)

    async def summary(self, context: SessionContext) -> RequestSummary:
        details = await self.gateway.list_requests(filter_for_session(context))
        return summarize(d.request for d in details)
