"""
Transaction service for managing database transactions centrally.
"""

from typing import Awaitable, Callable, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cleaning_dispatch.config.logging import get_logger
from cleaning_dispatch.domain.exceptions.remote_error import RemoteFailure
from cleaning_dispatch.domain.exceptions.validation_error import DuplicateRecordError
from cleaning_dispatch.infrastructure.monitoring.metrics import record_store_failure

logger = get_logger(__name__)

T = TypeVar("T")


class TransactionService:
    """Runs store operations as one unit of work on the shared session."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.logger = logger

    async def execute_in_transaction(
        self, operation: Callable[[], Awaitable[T]], name: str = "operation"
    ) -> T:
        """
        Execute an operation within a transaction.

        Every write issued by the operation is committed together or rolled
        back together. Constraint violations are re-raised as
        DuplicateRecordError, other store failures as RemoteFailure; domain
        errors raised by the operation propagate unchanged after the rollback.

        Args:
            operation: Async function to execute
            name: Operation name used in logs and errors

        Returns:
            Result of the operation
        """
        try:
            result = await operation()
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            self.logger.warning(
                "Transaction rolled back after constraint violation",
                operation=name,
                error=str(e.orig),
            )
            raise DuplicateRecordError(name, str(e.orig)) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error(
                "Transaction rolled back after store error",
                operation=name,
                error=str(e),
            )
            record_store_failure(name)
            raise RemoteFailure(name, str(e)) from e
        except Exception as e:
            await self.session.rollback()
            self.logger.info(
                "Transaction rolled back", operation=name, error=str(e)
            )
            raise

        self.logger.debug("Transaction committed", operation=name)
        return result

    async def read(
        self, operation: Callable[[], Awaitable[T]], name: str = "read"
    ) -> T:
        """Run a read-only operation, translating store errors."""
        try:
            return await operation()
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error("Store read failed", operation=name, error=str(e))
            record_store_failure(name)
            raise RemoteFailure(name, str(e)) from e
