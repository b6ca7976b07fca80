"""
FastAPI application factory.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cleaning_dispatch.api.middleware.error_handler import add_error_handlers
from cleaning_dispatch.api.middleware.logging import add_logging_middleware
from cleaning_dispatch.api.routes import admin, customer, employee, health, profiles
from cleaning_dispatch.config.database import close_database_connections
from cleaning_dispatch.config.logging import configure_logging, get_logger
from cleaning_dispatch.config.settings import settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Application startup",
        environment=settings.ENVIRONMENT,
        workflow_policy=settings.WORKFLOW_POLICY,
    )
    yield
    await close_database_connections()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    configure_logging()

    docs_enabled = settings.DEBUG or settings.ENABLE_SWAGGER
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Booking and dispatch API for a home-cleaning service",
        openapi_url=f"{settings.API_PREFIX}/openapi.json" if docs_enabled else None,
        docs_url=f"{settings.API_PREFIX}/docs" if docs_enabled else None,
        redoc_url=f"{settings.API_PREFIX}/redoc" if docs_enabled else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_error_handlers(app)
    add_logging_middleware(app)

    app.include_router(health.router, prefix=settings.API_PREFIX)
    app.include_router(profiles.router, prefix=settings.API_PREFIX)
    app.include_router(customer.router, prefix=settings.API_PREFIX)
    app.include_router(employee.router, prefix=settings.API_PREFIX)
    app.include_router(admin.router, prefix=settings.API_PREFIX)

    return app
