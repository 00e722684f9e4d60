"""Error Hierarchy — typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are the caller's fault and never retried
    - Store errors (500-level) propagate unmasked as 5xx responses
    - to_response() produces the REST envelope shared by all error handlers
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    MALFORMED_REQUEST = "malformed_request"
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    RESOURCE_NOT_FOUND = "resource_not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-scoped context attached to an error for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    method: str | None = None
    field_name: str | None = None


class SimpleApiError(Exception):
    """Base exception for all API errors."""

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

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "path": self.context.path,
                    "method": self.context.method,
                    "field": self.context.field_name,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class ContentValidationError(SimpleApiError):
    """Message content absent or longer than the allowed maximum."""
    def __init__(self, message: str, field: str = "content", context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field


class MalformedRequestError(SimpleApiError):
    """Request body could not be parsed into the expected shape."""
    def __init__(self, message: str = "Malformed request body", context: ErrorContext | None = None):
        super().__init__(
            message, "MALFORMED_REQUEST", ErrorCategory.MALFORMED_REQUEST,
            ErrorSeverity.ERROR, context, 400,
        )


class UnsupportedMediaTypeError(SimpleApiError):
    """Request body sent without an application/json content type."""
    def __init__(self, content_type: str | None, context: ErrorContext | None = None):
        super().__init__(
            f"Content type '{content_type or ''}' is not supported; use application/json",
            "UNSUPPORTED_MEDIA_TYPE", ErrorCategory.UNSUPPORTED_MEDIA_TYPE,
            ErrorSeverity.ERROR, context, 415,
        )
        self.content_type = content_type


class ResourceNotFoundError(SimpleApiError):
    """No route matches the requested path."""
    def __init__(self, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"Resource '{path}' not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class MethodNotAllowedError(SimpleApiError):
    """Route exists but does not accept the request method."""
    def __init__(self, method: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"Method {method} not allowed on '{path}'",
            "METHOD_NOT_ALLOWED", ErrorCategory.METHOD_NOT_ALLOWED,
            ErrorSeverity.WARNING, context, 405,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(SimpleApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
