"""Domain-specific exceptions for repository and service layer operations.

Every error raised by the core is a ``ServiceError`` tagged with an explicit
``ErrorCategory``. The boundary layer picks a response status by matching on
that category (see ``http_status_for``) instead of walking a class hierarchy.

Categories in use:
- VALIDATION: input shape is wrong ("no data supplied", bad filter name,
  schema violations). Raised before any I/O.
- RESOURCE_NOT_FOUND: a statement matched or affected zero rows for the
  requested identifier.
"""

from enum import Enum
from typing import Any, Dict, Optional
from http import HTTPStatus


class ErrorSeverity(Enum):
    """Error severity levels for logging and monitoring."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    SYSTEM = "system"


class ServiceError(Exception):
    """Base exception for all domain errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for client handling
        correlation_id: Request correlation ID for tracing
        details: Additional error context (sanitized for logging)
        user_message: User-friendly message for client display
        severity: Error severity level for logging/monitoring
        category: Error kind, used by the boundary layer to pick a status
        http_status: HTTP status code for API responses
    """

    def __init__(
        self,
        message: str,
        error_code: str = "SERVICE_ERROR",
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        user_message: Optional[str] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        http_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.correlation_id = correlation_id
        self.details = details or {}
        self.user_message = user_message or message
        self.severity = severity
        self.category = category
        self.http_status = http_status

    def to_dict(self, include_sensitive: bool = False) -> Dict[str, Any]:
        """Convert exception to dictionary for logging or client response.

        Args:
            include_sensitive: Whether to include sensitive details

        Returns:
            Dictionary representation of the error
        """
        result = {
            "error_code": self.error_code,
            "message": self.user_message,
            "severity": self.severity.value,
            "category": self.category.value,
            "http_status": self.http_status.value
        }

        if self.correlation_id:
            result["correlation_id"] = self.correlation_id

        if include_sensitive and self.details:
            result["details"] = self.details
            result["internal_message"] = self.message

        return result

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"


class BadRequestError(ServiceError):
    """Request input failed validation (HTTP 400)."""

    def __init__(
        self,
        message: str,
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            correlation_id=correlation_id,
            details=details,
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            http_status=HTTPStatus.BAD_REQUEST
        )


class NotFoundError(ServiceError):
    """Requested resource does not exist (HTTP 404)."""

    def __init__(
        self,
        message: str,
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="RESOURCE_NOT_FOUND",
            correlation_id=correlation_id,
            details=details,
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.RESOURCE_NOT_FOUND,
            http_status=HTTPStatus.NOT_FOUND
        )


_STATUS_BY_CATEGORY: Dict[ErrorCategory, HTTPStatus] = {
    ErrorCategory.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorCategory.RESOURCE_NOT_FOUND: HTTPStatus.NOT_FOUND,
}


def http_status_for(error: Exception) -> HTTPStatus:
    """Pick the response status for any failure reaching the boundary layer.

    Domain errors map by category; everything else (store unreachable,
    constraint violations, malformed SQL) is a generic server error.
    """
    if isinstance(error, ServiceError):
        return _STATUS_BY_CATEGORY.get(error.category, HTTPStatus.INTERNAL_SERVER_ERROR)
    return HTTPStatus.INTERNAL_SERVER_ERROR
