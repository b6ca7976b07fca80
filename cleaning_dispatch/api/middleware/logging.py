"""
Request/Response logging middleware.
"""

import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response

from cleaning_dispatch.config.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
)
from cleaning_dispatch.infrastructure.monitoring.metrics import record_api_request

logger = get_logger(__name__)


def add_logging_middleware(app: FastAPI) -> None:
    """Add request/response logging middleware."""

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        start_time = time.time()

        clear_request_context()
        bind_request_context(request_id=request_id)
        request.state.request_id = request_id

        logger.info(
            "Request started",
            method=request.method,
            path=request.url.path,
            query_params=str(request.query_params),
            client_host=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
                process_time=f"{process_time:.4f}s",
            )
            record_api_request(request.method, 500, process_time)
            raise
        finally:
            clear_request_context()

        process_time = time.time() - start_time
        logger.info(
            "Request completed",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time=f"{process_time:.4f}s",
        )
        record_api_request(request.method, response.status_code, process_time)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response
