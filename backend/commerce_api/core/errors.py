"""Error Hierarchy — typed, categorized exceptions for all commerce API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Semantic errors are 400-level; structural (schema) errors never come through here,
      FastAPI raises RequestValidationError for those and the handler maps it to 422
    - to_response() produces the uniform envelope: {"error": <message>, "code": ..., ...}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CommerceError base: one global handler catches all
    - "error" is a plain string: the dashboard surfaces it to the user verbatim
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field_name: str | None = None
    path: str | None = None
    debug_info: dict[str, Any] | None = None
    retry_after_ms: int | None = None


class CommerceError(Exception):
    """Base exception for all commerce API errors."""

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
        """Convert to the standardized REST error envelope."""
        body = {
            "error": self.message,
            "code": self.code,
            "category": self.category.value,
        }
        if self.context.field_name:
            body["fields"] = {self.context.field_name: self.message}
        return body


# ─── Semantic Errors (400-level) ─────────────────────────────────

class InvalidWeightError(CommerceError):
    """Shipping weight is well-formed but not positive."""
    def __init__(self, weight: float, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = "weight"
        ctx.debug_info = {"weight": weight}
        super().__init__(
            "Weight must be positive",
            "INVALID_WEIGHT", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.weight = weight


class InvalidQuantityError(CommerceError):
    """Order quantity is an integer but not positive."""
    def __init__(self, quantity: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = "quantity"
        ctx.debug_info = {"quantity": quantity}
        super().__init__(
            "Quantity must be a positive integer",
            "INVALID_QUANTITY", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.quantity = quantity


class WeightOutOfRangeError(CommerceError):
    """Weight is positive but too large for a finite shipping cost."""
    def __init__(self, weight: float, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = "weight"
        ctx.debug_info = {"weight": weight}
        super().__init__(
            "Weight is too large",
            "WEIGHT_OUT_OF_RANGE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.weight = weight


class RouteNotFoundError(CommerceError):
    """No route matches the requested path."""
    def __init__(self, path: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.path = path
        super().__init__(
            "Not found", "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )


# ─── Infrastructure Errors (500-level) ───────────────────────────

class MailingListError(CommerceError):
    """Mailing-list provider call failed."""
    def __init__(
        self,
        message: str,
        provider_error_type: str,
        retry_after_ms: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.retry_after_ms = retry_after_ms
        super().__init__(
            f"Mailing list provider error ({provider_error_type}): {message}",
            "MAILING_LIST_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 502,
        )
        self.provider_error_type = provider_error_type


# ─── Validation Error Formatting ─────────────────────────────────

_VALUE_ERROR_PREFIX = "Value error, "


def summarize_validation_errors(errors) -> tuple[str, dict[str, str]]:
    """Collapse Pydantic error dicts into (summary, {field: message}).

    The leading "body" location segment is dropped; the first message per
    field wins. Summary is "" when there are no errors.
    """
    fields: dict[str, str] = {}
    for e in errors:
        loc = [str(part) for part in e["loc"]]
        if loc and loc[0] == "body":
            loc = loc[1:]
        name = ".".join(loc) or "body"
        message = e["msg"]
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        fields.setdefault(name, message)
    summary = "; ".join(f"{name}: {msg}" for name, msg in fields.items())
    return summary, fields
