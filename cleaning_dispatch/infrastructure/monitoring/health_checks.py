"""
Health check implementations for the application.
"""

import asyncio
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from cleaning_dispatch.config.logging import get_logger
from cleaning_dispatch.config.settings import settings

logger = get_logger(__name__)


@dataclass
class HealthStatus:
    """Outcome of a round of health checks."""

    is_healthy: bool
    checks: Dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )


class HealthChecker:
    """Health checker for application components."""

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session
        self.checks = {
            "database": self._check_database,
        }

    async def run_health_checks(self) -> Dict[str, Any]:
        """Run all health checks."""
        results = {}

        for check_name, check_func in self.checks.items():
            try:
                results[check_name] = await asyncio.wait_for(
                    check_func(), timeout=settings.HEALTH_CHECK_TIMEOUT
                )
            except Exception as e:
                logger.error("Health check failed", check_name=check_name, error=str(e))
                results[check_name] = {"status": "error", "error": str(e)}

        return results

    async def _check_database(self) -> Dict[str, Any]:
        """Check database connectivity."""
        start_time = time.perf_counter()
        await self.db_session.execute(text("SELECT 1"))
        return {
            "status": "healthy",
            "response_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
        }

    async def check_readiness(self) -> HealthStatus:
        """Check if the service is ready to receive traffic."""
        results = await self.run_health_checks()
        return HealthStatus(
            is_healthy=all(r.get("status") == "healthy" for r in results.values()),
            checks=results,
        )
