"""Error Hierarchy: typed, categorized exceptions for every personal-api failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors are 400-level; provider and asset failures are 500-level
    - to_response() produces the REST envelope sent to clients
    - Provider responses and filesystem paths never appear in to_response()

Design Decisions:
    - Single hierarchy with PersonalApiError base: one global handler catches all
    - ContactValidationError overrides to_response(): the contact form client
      expects {success, message, errors} rather than the generic envelope
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from personal_api.core.domain_types import FieldError


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    contact_id: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class PersonalApiError(Exception):
    """Base exception for all personal-api errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Input Errors (400-level) ───────────────────────────────────

class ContactValidationError(PersonalApiError):
    """Contact form failed one or more field checks."""
    def __init__(self, errors: list[FieldError], context: ErrorContext | None = None):
        super().__init__(
            f"Contact form failed validation: {', '.join(e.field for e in errors)}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.errors = errors

    def to_response(self) -> dict:
        return {
            "success": False,
            "message": "Validation failed",
            "errors": [e.to_dict() for e in self.errors],
        }


# ─── Infrastructure Errors (500-level) ──────────────────────────

class EmailDeliveryError(PersonalApiError):
    """Transactional email provider rejected the request or was unreachable."""
    def __init__(
        self,
        message: str,
        reason: str,
        provider_status: int | None = None,
        context: ErrorContext | None = None,
    ):
        category = (
            ErrorCategory.TIMEOUT if reason == "timeout"
            else ErrorCategory.EXTERNAL_API
        )
        super().__init__(
            f"Email provider error ({reason}): {message}",
            "EMAIL_DELIVERY_FAILED", category,
            ErrorSeverity.CRITICAL, context, 502,
        )
        self.reason = reason
        self.provider_status = provider_status


class ResumeUnavailableError(PersonalApiError):
    """Resume PDF missing or unreadable on disk."""
    def __init__(self, path: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "Resume not available"
        ctx.debug_info = {**(ctx.debug_info or {}), "path": path}
        super().__init__(
            f"Resume file unavailable at {path}",
            "RESUME_UNAVAILABLE", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.path = path
