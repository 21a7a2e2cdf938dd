"""Error Hierarchy — the five failure kinds every request can end in.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error records the RequestStage at which the request exited
    - 400-level errors carry user-facing messages; InternalError never does
    - to_response() produces the REST envelope used by all handlers

Design Decisions:
    - Single hierarchy with ScholarlogError base: one FastAPI handler catches all
    - ValidationFailedError carries the full message list, not just the first violation
    - UnauthenticatedError has one fixed message: never reveals which credential was wrong
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from scholarlog.core.domain_types import RequestStage


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
    RESOURCE_NOT_FOUND = "resource_not_found"
    VALIDATION = "validation"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability: logged, never echoed to the caller."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_kind: str | None = None
    resource_id: int | str | None = None
    user_id: int | None = None
    debug_info: dict[str, Any] | None = None


class ScholarlogError(Exception):
    """Base exception for all Scholarlog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        stage: RequestStage = RequestStage.COMMITTED,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.stage = stage

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "stage": self.stage.value,
            "kind": self.context.resource_kind,
            "resource_id": self.context.resource_id,
            "user_id": self.context.user_id,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class UnauthenticatedError(ScholarlogError):
    """Credentials absent, malformed, or not matching any user."""
    MESSAGE = "Access Denied"

    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            self.MESSAGE, "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401, RequestStage.UNAUTHENTICATED,
        )


class ForbiddenError(ScholarlogError):
    """Authenticated caller is not the owner of the target record."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403, RequestStage.AUTHORIZED,
        )


class NotFoundError(ScholarlogError):
    """No record exists at the given id."""
    def __init__(self, label: str, resource_id: int | str, context: ErrorContext | None = None):
        super().__init__(
            f"{label} Not Found", "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404, RequestStage.VALIDATED,
        )
        self.resource_id = resource_id


class ValidationFailedError(ScholarlogError):
    """One or more field or uniqueness violations."""
    def __init__(self, messages: list[str], context: ErrorContext | None = None):
        super().__init__(
            "Validation failed", "VALIDATION_FAILED", ErrorCategory.VALIDATION,
            ErrorSeverity.INFO, context, 400, RequestStage.VALIDATED,
        )
        self.messages = list(messages)

    def to_response(self) -> dict:
        response = super().to_response()
        response["errors"] = list(self.messages)
        return response


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalError(ScholarlogError):
    """Unexpected failure: the message returned to callers is always generic."""
    MESSAGE = "An unexpected error occurred"

    def __init__(
        self,
        detail: str = "",
        code: str = "INTERNAL_ERROR",
        category: ErrorCategory = ErrorCategory.INTERNAL,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            self.MESSAGE, code, category, ErrorSeverity.CRITICAL, context, 500,
        )
        self.detail = detail


class DatabaseError(InternalError):
    """Store unreachable or a database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE, context,
        )
        self.operation = operation
