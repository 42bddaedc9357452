"""Domain Types: value objects shared by the contact pipeline.

Invariants:
    - ContactSubmission only ever built by validate_contact (post-sanitization)
    - All value objects are frozen, request-scoped, never mutated or persisted
    - FieldErrorCode enumerates every constraint the validator can report
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


ContactId = NewType("ContactId", str)


# ─── Enums ───────────────────────────────────────────────────────

class FieldErrorCode(str, Enum):
    """Constraint violated by a contact form field."""
    REQUIRED = "required"
    INVALID_TYPE = "invalid_type"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID_EMAIL = "invalid_email"
    INVALID_PHONE = "invalid_phone"
    INVALID_JSON = "invalid_json"


class ContactField(str, Enum):
    """Wire names of the contact form fields (camelCase, as the frontend posts them)."""
    EMAIL = "email"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    PHONE_NUMBER = "phoneNumber"
    MESSAGE = "message"


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class ContactSubmission:
    """Validated contact form. phone_number is "" when the field was omitted."""
    email: str
    first_name: str
    last_name: str
    phone_number: str
    message: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class FieldError:
    field: str
    code: FieldErrorCode
    message: str

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "code": self.code.value,
            "message": self.message,
        }


@dataclass(frozen=True)
class NotificationResult:
    """Outcome of one contact submission, returned to the client as-is."""
    success: bool
    message: str
    id: ContactId
