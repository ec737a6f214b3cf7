"""Base service class: transactions, correlation-tagged errors, structured logs."""

import logging
from typing import Optional, Callable, TypeVar, Any
from sqlalchemy.orm import Session

from app.core.logging_config import sanitize_log_data
from app.services.exceptions import ServiceError

T = TypeVar("T")


class BaseService:
    """Runs repository calls on behalf of one request.

    Every ``ServiceError`` leaving a service carries the service's correlation
    id, whether or not the repository that raised it was built with one.
    Store errors pass through untouched.
    """

    def __init__(self, correlation_id: Optional[str] = None):
        self.correlation_id = correlation_id
        self.logger = logging.getLogger(self.__class__.__name__)

    def _tag(self, error: ServiceError) -> ServiceError:
        if error.correlation_id is None:
            error.correlation_id = self.correlation_id
        return error

    def run(self, operation: Callable[[], T]) -> T:
        """Execute a read-only operation."""
        try:
            return operation()
        except ServiceError as e:
            raise self._tag(e)

    def run_in_transaction(self, db: Session, operation: Callable[[], T]) -> T:
        """Execute operation within a database transaction.

        Commits on success, rolls back on any exception and re-raises it.
        """
        try:
            result = operation()
            db.commit()
        except Exception as e:
            db.rollback()
            level = logging.WARNING if isinstance(e, ServiceError) else logging.ERROR
            self.logger.log(
                level,
                "Transaction rolled back",
                extra=sanitize_log_data({
                    "correlation_id": self.correlation_id,
                    "service": self.__class__.__name__,
                    "error": str(e)
                })
            )
            if isinstance(e, ServiceError):
                raise self._tag(e)
            raise
        return result

    def log_operation(self, operation: str, **kwargs: Any) -> None:
        """Log service operation with structured, redacted fields."""
        log_data = sanitize_log_data({
            "correlation_id": self.correlation_id,
            "service": self.__class__.__name__,
            "operation": operation,
            **kwargs
        })
        self.logger.info(f"Service operation: {operation}", extra=log_data)
