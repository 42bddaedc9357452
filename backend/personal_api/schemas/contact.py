"""Contact Schemas: Pydantic response contracts for the contact endpoint.

Invariants:
    - ContactResponse mirrors NotificationResult exactly (success, message, id)
    - ContactErrorResponse documents the 400 body built by ContactValidationError
"""

from pydantic import BaseModel

from personal_api.core.domain_types import NotificationResult


class ContactResponse(BaseModel):
    success: bool
    message: str
    id: str

    @classmethod
    def from_result(cls, result: NotificationResult) -> "ContactResponse":
        return cls(success=result.success, message=result.message, id=result.id)


class ContactFieldError(BaseModel):
    field: str
    code: str
    message: str


class ContactErrorResponse(BaseModel):
    """Validation failure, every violated field constraint, not just the first."""
    success: bool = False
    message: str
    errors: list[ContactFieldError]
