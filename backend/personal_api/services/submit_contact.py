"""Submit Contact: validate, assign a correlation id, notify once.

Invariants:
    - Notifier is never called unless validate_contact returned a ContactSubmission
    - One contact id (uuid4) per accepted submission, returned to the client either way
    - EmailDeliveryError is logged with full detail and converted into a generic
      failed NotificationResult; provider detail never reaches the result message
"""

import logging
import uuid
from typing import Any, Protocol

from personal_api.core.domain_types import (
    ContactId,
    ContactSubmission,
    NotificationResult,
)
from personal_api.core.errors import ContactValidationError, EmailDeliveryError
from personal_api.core.validate_contact import validate_contact

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = (
    "Your message was received, but there was an issue sending the "
    "notification email. Please try again or contact us directly."
)


class Notifier(Protocol):
    async def send(
        self, submission: ContactSubmission, contact_id: ContactId,
    ) -> NotificationResult: ...


def new_contact_id() -> ContactId:
    return ContactId(str(uuid.uuid4()))


async def submit_contact(raw: Any, notifier: Notifier) -> NotificationResult:
    """Run one contact submission through the pipeline.

    Raises ContactValidationError when the payload fails any field check.
    """
    result = validate_contact(raw)
    if not isinstance(result, ContactSubmission):
        raise ContactValidationError(result)

    contact_id = new_contact_id()
    logger.info(
        f"Contact form submitted: {result.full_name} <{result.email}>",
        extra={"contact_id": contact_id},
    )

    try:
        return await notifier.send(result, contact_id)
    except EmailDeliveryError as e:
        logger.error(
            f"Failed to send contact form email: {e.message}",
            extra={
                "contact_id": contact_id,
                "error_code": e.code,
                "provider_status": e.provider_status,
                "reason": e.reason,
            },
        )
        return NotificationResult(
            success=False, message=FAILURE_MESSAGE, id=contact_id,
        )
