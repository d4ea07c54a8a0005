"""Error Hierarchy — typed, categorized exceptions for every SmartSales failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries an ErrorDetail: either FieldErrors or MessageDetail
    - to_response() produces the uniform envelope with data=None
    - Adapter errors (500) pass the store's message through unchanged

Design Decisions:
    - Single hierarchy with SmartSalesError base: one FastAPI handler renders all of them
    - ErrorDetail is a two-variant union; both variants render to a flat JSON object,
      so `error.name` / `error.id` stay addressable by clients
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    TAXONOMY = "taxonomy"
    INTERNAL = "internal"


# ─── Error Detail ────────────────────────────────────────────────

@dataclass(frozen=True)
class FieldErrors:
    """Per-field messages, e.g. {"name": "name is required."}."""
    fields: dict[str, Any] = field(default_factory=dict)

    def render(self, message: str) -> dict[str, Any]:
        return dict(self.fields) if self.fields else {"error": message}


@dataclass(frozen=True)
class MessageDetail:
    """Single message detail, rendered as {"error": message}."""
    message: str | None = None

    def render(self, message: str) -> dict[str, Any]:
        return {"error": self.message or message}


ErrorDetail = FieldErrors | MessageDetail


class SmartSalesError(Exception):
    """Base exception for all SmartSales errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        detail: ErrorDetail | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.detail = detail or MessageDetail()

    def to_response(self) -> dict:
        """Convert to the uniform error envelope."""
        return {
            "success": False,
            "message": self.message,
            "data": None,
            "error": self.detail.render(self.message),
        }


# ─── Request Errors (400-level) ──────────────────────────────────

class RequestValidationFailed(SmartSalesError):
    """Missing or invalid input. Raised before any write happens."""
    def __init__(self, message: str, detail: ErrorDetail | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400, detail,
        )


class AuthenticationError(SmartSalesError):
    """Caller is not authenticated."""
    def __init__(self, message: str):
        super().__init__(
            message, "rest_forbidden", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, 401,
        )


class PermissionDeniedError(SmartSalesError):
    """Caller is authenticated but lacks the role or capability required."""
    def __init__(self, message: str):
        super().__init__(
            message, "rest_forbidden", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, 403,
        )


class ResourceNotFoundError(SmartSalesError):
    """Requested resource does not exist."""
    def __init__(self, message: str, detail: ErrorDetail | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404, detail,
        )


# ─── Adapter Errors (500-level) ──────────────────────────────────

class StoreError(SmartSalesError):
    """Settings or catalog store operation failed."""
    def __init__(
        self, message: str, operation: str = "unknown",
        detail: ErrorDetail | None = None,
    ):
        super().__init__(
            message, "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500, detail,
        )
        self.operation = operation


class TaxonomyError(SmartSalesError):
    """Taxonomy store rejected a term operation (duplicate, bad parent, ...)."""
    def __init__(
        self, message: str, code: str = "term_error",
        detail: ErrorDetail | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.TAXONOMY,
            ErrorSeverity.ERROR, 500, detail,
        )
