"""Contact Form Validation: sanitizes and checks the raw contact payload.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - Every field is sanitized (Unicode C* chars stripped, trimmed) before it is checked
    - check_* functions return FieldError on violation, None on success
    - validate_contact runs every check, all violations reported, not just the first
    - ContactSubmission returned only when the error list is empty

Design Decisions:
    - Pure functions over a Pydantic model: error codes stay enumerable
      (FieldErrorCode) instead of mirroring Pydantic's error types
"""

import re
import unicodedata
from typing import Any

from email_validator import EmailNotValidError, validate_email

from personal_api.core.domain_types import (
    ContactField,
    ContactSubmission,
    FieldError,
    FieldErrorCode,
)

EMAIL_MAX_LENGTH = 254
NAME_MAX_LENGTH = 100
PHONE_MIN_LENGTH = 10
PHONE_MAX_LENGTH = 20
MESSAGE_MAX_LENGTH = 1000

PHONE_PATTERN = re.compile(r"^[0-9+\-.() ]+$")

_MULTILINE_KEEP = frozenset("\n\t")


def sanitize_input(value: str, multiline: bool = False) -> str:
    """Strip control, format and other C* characters, then surrounding whitespace.

    multiline=True keeps newlines and tabs so message formatting survives.
    """
    keep = _MULTILINE_KEEP if multiline else frozenset()
    cleaned = "".join(
        c for c in value
        if c in keep or not unicodedata.category(c).startswith("C")
    )
    return cleaned.strip()


# ─── Field checks ────────────────────────────────────────────────

def check_email(value: str) -> FieldError | None:
    field = ContactField.EMAIL.value
    if not value:
        return FieldError(field, FieldErrorCode.REQUIRED, "Email is required")
    if len(value) > EMAIL_MAX_LENGTH:
        return FieldError(
            field, FieldErrorCode.TOO_LONG,
            f"Email must be at most {EMAIL_MAX_LENGTH} characters",
        )
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return FieldError(
            field, FieldErrorCode.INVALID_EMAIL,
            "Email must be a valid email address",
        )
    return None


def check_name(field: ContactField, value: str) -> FieldError | None:
    label = "First name" if field == ContactField.FIRST_NAME else "Last name"
    if not value:
        return FieldError(field.value, FieldErrorCode.REQUIRED, f"{label} is required")
    if len(value) > NAME_MAX_LENGTH:
        return FieldError(
            field.value, FieldErrorCode.TOO_LONG,
            f"{label} must be at most {NAME_MAX_LENGTH} characters",
        )
    return None


def check_phone(value: str) -> FieldError | None:
    """Phone is optional, an empty value always passes."""
    field = ContactField.PHONE_NUMBER.value
    if not value:
        return None
    if len(value) < PHONE_MIN_LENGTH:
        return FieldError(
            field, FieldErrorCode.TOO_SHORT,
            f"Phone number must be at least {PHONE_MIN_LENGTH} characters",
        )
    if len(value) > PHONE_MAX_LENGTH:
        return FieldError(
            field, FieldErrorCode.TOO_LONG,
            f"Phone number must be at most {PHONE_MAX_LENGTH} characters",
        )
    if not PHONE_PATTERN.match(value):
        return FieldError(
            field, FieldErrorCode.INVALID_PHONE,
            "Phone number may only contain digits, spaces and + - . ( )",
        )
    return None


def check_message(value: str) -> FieldError | None:
    field = ContactField.MESSAGE.value
    if not value:
        return FieldError(field, FieldErrorCode.REQUIRED, "Message is required")
    if len(value) > MESSAGE_MAX_LENGTH:
        return FieldError(
            field, FieldErrorCode.TOO_LONG,
            f"Message must be at most {MESSAGE_MAX_LENGTH} characters",
        )
    return None


# ─── Payload ─────────────────────────────────────────────────────

def _read_field(
    raw: dict, field: ContactField, multiline: bool = False,
) -> tuple[str, FieldError | None]:
    """Pull one field out of the payload. Missing/null reads as empty string."""
    value = raw.get(field.value)
    if value is None:
        return "", None
    if not isinstance(value, str):
        return "", FieldError(
            field.value, FieldErrorCode.INVALID_TYPE,
            f"{field.value} must be a string",
        )
    return sanitize_input(value, multiline=multiline), None


def validate_contact(raw: Any) -> ContactSubmission | list[FieldError]:
    """Sanitize and check a deserialized contact payload.

    Returns a ContactSubmission when every check passes, otherwise the list of
    field errors in wire-field order (at most one per field).
    """
    if not isinstance(raw, dict):
        return [FieldError(
            "body", FieldErrorCode.INVALID_TYPE,
            "Request body must be a JSON object",
        )]

    email, email_err = _read_field(raw, ContactField.EMAIL)
    first, first_err = _read_field(raw, ContactField.FIRST_NAME)
    last, last_err = _read_field(raw, ContactField.LAST_NAME)
    phone, phone_err = _read_field(raw, ContactField.PHONE_NUMBER)
    message, message_err = _read_field(raw, ContactField.MESSAGE, multiline=True)

    errors = [
        e for e in (
            email_err or check_email(email),
            first_err or check_name(ContactField.FIRST_NAME, first),
            last_err or check_name(ContactField.LAST_NAME, last),
            phone_err or check_phone(phone),
            message_err or check_message(message),
        )
        if e is not None
    ]
    if errors:
        return errors

    return ContactSubmission(
        email=email,
        first_name=first,
        last_name=last,
        phone_number=phone,
        message=message,
    )
