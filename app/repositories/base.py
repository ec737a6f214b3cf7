"""Base repository class for hand-written SQL data access."""

import logging
from typing import Any, Dict, List, Optional, Sequence
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.core.logging_config import sanitize_log_data
from app.db.executor import QueryExecutor


class BaseRepository:
    """Base repository class owning the query executor for one table.

    Provides:
    - One-statement round trips through a positional-parameter executor
    - Store error logging (errors are re-raised unchanged)
    - Structured logging for data operations
    """

    table: str = ""

    def __init__(self, db: Session, correlation_id: Optional[str] = None):
        """Initialize repository with a database session.

        Args:
            db: SQLAlchemy database session
            correlation_id: Optional request correlation ID for logging
        """
        self.db = db
        self.executor = QueryExecutor(db)
        self.correlation_id = correlation_id
        self.logger = logging.getLogger(self.__class__.__name__)

    def _query(self, operation: str, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """Execute a single statement and return its rows.

        Args:
            operation: Operation name used in log records
            sql: Statement with ``$n`` placeholders
            params: Positional parameter values

        Raises:
            SQLAlchemyError: On database operation failure
        """
        try:
            return self.executor.execute(sql, params)
        except SQLAlchemyError as e:
            self.logger.error(
                f"Failed to {operation} on {self.table}",
                extra=sanitize_log_data({
                    "correlation_id": self.correlation_id,
                    "repository": self.__class__.__name__,
                    "operation": operation,
                    "error": str(e)
                })
            )
            raise

    def _log_operation(self, operation: str, **kwargs: Any) -> None:
        """Log repository operation with structured, redacted fields.

        Args:
            operation: Name of the operation being performed
            **kwargs: Additional fields to include in log
        """
        log_data = sanitize_log_data({
            "correlation_id": self.correlation_id,
            "repository": self.__class__.__name__,
            "operation": operation,
            **kwargs
        })
        self.logger.info(f"Repository operation: {operation}", extra=log_data)
