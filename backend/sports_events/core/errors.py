"""Error Hierarchy — closed, typed taxonomy for every failure the pipeline reports.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - The taxonomy is closed: Authentication, Authorization, Validation, NotFound, Repository
    - A foreign row and a missing row both raise NotFoundError (no existence leak)
    - to_failure_dict() produces the same envelope the action boundary returns

Design Decisions:
    - Single hierarchy with SportsEventsError base: action boundary and FastAPI
      global handler both catch the base class (uniform error shape)
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context attached to an error for logs, never shown to the user."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    event_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class SportsEventsError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_failure_dict(self) -> dict:
        """Convert to the failure side of the result envelope."""
        return {"success": False, "error": self.message, "code": self.code}


# ─── Domain Errors (400-level) ──────────────────────────────────

class AuthenticationError(SportsEventsError):
    """No valid identity for an operation that needs a signed-in actor."""
    def __init__(
        self, message: str = "Not authenticated", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "AUTH_ERROR", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class AuthorizationError(SportsEventsError):
    """Identity present but not allowed.

    Ownership scoping turns cross-user access into NotFoundError, so nothing
    raises this today.
    """
    def __init__(
        self,
        message: str = "Not authorized to perform this action",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class ValidationError(SportsEventsError):
    """A proposed record violates a field rule. First violation wins."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field

    def to_failure_dict(self) -> dict:
        return {**super().to_failure_dict(), "field": self.field}


class NotFoundError(SportsEventsError):
    """No row matches both the id and the caller's ownership."""
    def __init__(
        self,
        resource_type: str,
        resource_id: str | None = None,
        context: ErrorContext | None = None,
    ):
        message = (
            f"{resource_type} with id '{resource_id}' not found"
            if resource_id else f"{resource_type} not found"
        )
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class RepositoryError(SportsEventsError):
    """Store operation failed (connectivity, constraint violation, driver error)."""
    def __init__(
        self, message: str, operation: str = "unknown", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "REPOSITORY_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
