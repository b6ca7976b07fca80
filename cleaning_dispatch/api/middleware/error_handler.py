"""
Error handling middleware.
"""

import traceback

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from cleaning_dispatch.config.logging import get_logger
from cleaning_dispatch.domain.exceptions.authentication_error import (
    NotAuthenticatedError,
)
from cleaning_dispatch.domain.exceptions.not_found_error import NotFoundError
from cleaning_dispatch.domain.exceptions.remote_error import RemoteFailure
from cleaning_dispatch.domain.exceptions.validation_error import ValidationError
from cleaning_dispatch.domain.exceptions.workflow_error import (
    InvalidTransitionError,
    PermissionDeniedError,
    WorkflowError,
)
from cleaning_dispatch.infrastructure.monitoring.metrics import record_rejected_command

logger = get_logger(__name__)


def _error_response(status_code: int, error: str, message: str, error_type: str):
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "type": error_type},
    )


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Validation error", error=str(exc), path=request.url.path)
        record_rejected_command("validation_error")
        return _error_response(400, "Validation Error", str(exc), "validation_error")

    @app.exception_handler(NotAuthenticatedError)
    async def not_authenticated_handler(request: Request, exc: NotAuthenticatedError):
        logger.info("Not authenticated", error=str(exc), path=request.url.path)
        return _error_response(401, "Not Authenticated", str(exc), "not_authenticated")

    @app.exception_handler(PermissionDeniedError)
    async def permission_denied_handler(request: Request, exc: PermissionDeniedError):
        logger.warning("Permission denied", error=str(exc), path=request.url.path)
        record_rejected_command("permission_denied")
        return _error_response(403, "Permission Denied", str(exc), "permission_denied")

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.info("Not found", error=str(exc), path=request.url.path)
        return _error_response(404, "Not Found", str(exc), "not_found")

    @app.exception_handler(InvalidTransitionError)
    async def invalid_transition_handler(request: Request, exc: InvalidTransitionError):
        logger.warning("Invalid transition", error=str(exc), path=request.url.path)
        record_rejected_command("invalid_transition")
        return _error_response(409, "Invalid Transition", str(exc), "invalid_transition")

    @app.exception_handler(WorkflowError)
    async def workflow_error_handler(request: Request, exc: WorkflowError):
        logger.warning("Workflow error", error=str(exc), path=request.url.path)
        record_rejected_command("workflow_error")
        return _error_response(409, "Workflow Error", str(exc), "workflow_error")

    @app.exception_handler(RemoteFailure)
    async def remote_failure_handler(request: Request, exc: RemoteFailure):
        # Store details stay in the log
        logger.error(
            "Store failure",
            operation=exc.operation,
            error=str(exc),
            path=request.url.path,
        )
        return _error_response(
            503,
            "Service Unavailable",
            "The request store is unavailable, please retry",
            "remote_failure",
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error", error=str(exc), path=request.url.path)
        return _error_response(
            500, "Database Error", "A database error occurred", "database_error"
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return _error_response(exc.status_code, "HTTP Error", exc.detail, "http_error")

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        return _error_response(
            500,
            "Internal Server Error",
            "An unexpected error occurred",
            "internal_error",
        )
