"""
Main application entry point.
"""

from cleaning_dispatch.api.app import create_app
from cleaning_dispatch.config.logging import get_logger
from cleaning_dispatch.config.settings import settings

logger = get_logger(__name__)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting Cleaning Dispatch server")

    uvicorn.run(
        "cleaning_dispatch.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )
