"""Contact Form: accepts submissions and relays them to the email provider.

Invariants:
    - Body parsed here; any JSON syntax error → 400 in the contact error shape
    - Validation errors raise ContactValidationError (400, every failing field)
    - Provider failure → 502 {success: false, message, id} with no provider detail
    - Served at /contact and /api/contact (the path the site frontend posts to)
"""

import json

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from personal_api.api.dependencies import get_notifier
from personal_api.core.domain_types import FieldError, FieldErrorCode
from personal_api.core.errors import ContactValidationError
from personal_api.schemas.contact import ContactErrorResponse, ContactResponse
from personal_api.services.submit_contact import Notifier, submit_contact

router = APIRouter(tags=["contact"])

_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ContactErrorResponse},
    status.HTTP_502_BAD_GATEWAY: {"model": ContactResponse},
}


async def _read_json_body(request: Request):
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ContactValidationError([FieldError(
            "body", FieldErrorCode.INVALID_JSON,
            "Request body must be valid JSON",
        )]) from e


@router.post("/contact", response_model=ContactResponse, responses=_RESPONSES)
@router.post("/api/contact", response_model=ContactResponse, responses=_RESPONSES)
async def post_contact(request: Request, notifier: Notifier = Depends(get_notifier)):
    """Validate a contact form submission and send it by email."""
    raw = await _read_json_body(request)
    result = await submit_contact(raw, notifier)
    body = ContactResponse.from_result(result)
    if not result.success:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content=body.model_dump(),
        )
    return body
