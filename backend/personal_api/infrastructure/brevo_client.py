"""Brevo Notifier: sends contact submissions through Brevo's transactional email API.

Invariants:
    - Exactly one outbound POST per send() call: no retry, no idempotency key
    - Bounded timeout on every call (BrevoConfig.timeout_seconds)
    - 2xx → NotificationResult(success=True); anything else → EmailDeliveryError
    - Provider response bodies only ever reach logs and the error's debug_info

Design Decisions:
    - Shared httpx.AsyncClient injected by the caller: connection pooling across
      requests, and tests swap in httpx.MockTransport
    - BrevoConfig frozen and built once from Settings (dependency injection, no globals)
"""

import logging
from dataclasses import dataclass

import httpx

from personal_api.config import Settings
from personal_api.core.domain_types import (
    ContactId,
    ContactSubmission,
    NotificationResult,
)
from personal_api.core.errors import EmailDeliveryError, ErrorContext
from personal_api.core.format_email import EmailAddressing, format_contact_email

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Thank you for your message. We'll get back to you soon!"

# Provider error bodies can be large HTML pages; keep logs bounded
_MAX_LOGGED_BODY = 500


@dataclass(frozen=True)
class BrevoConfig:
    api_key: str
    api_url: str
    sender_email: str
    sender_name: str
    recipient_email: str
    recipient_name: str
    timeout_seconds: float

    @classmethod
    def from_settings(cls, settings: Settings) -> "BrevoConfig":
        return cls(
            api_key=settings.brevo_api_key,
            api_url=settings.brevo_api_url,
            sender_email=settings.brevo_sender_email,
            sender_name=settings.brevo_sender_name,
            recipient_email=settings.recipient_email,
            recipient_name=settings.contact_recipient_name,
            timeout_seconds=settings.brevo_timeout_seconds,
        )

    @property
    def addressing(self) -> EmailAddressing:
        return EmailAddressing(
            sender_email=self.sender_email,
            sender_name=self.sender_name,
            recipient_email=self.recipient_email,
            recipient_name=self.recipient_name,
        )


class BrevoNotifier:
    """Issues one Brevo send per contact submission."""

    def __init__(self, config: BrevoConfig, http_client: httpx.AsyncClient):
        self.config = config
        self.http_client = http_client

    async def send(
        self, submission: ContactSubmission, contact_id: ContactId,
    ) -> NotificationResult:
        """Send the notification email. Raises EmailDeliveryError on any failure."""
        context = ErrorContext(contact_id=contact_id)
        payload = format_contact_email(
            submission, contact_id, self.config.addressing,
        )
        logger.debug(
            f"Sending contact email via Brevo to {self.config.recipient_email}",
            extra={"contact_id": contact_id},
        )
        try:
            response = await self.http_client.post(
                self.config.api_url,
                json=payload,
                headers={
                    "api-key": self.config.api_key,
                    "accept": "application/json",
                },
                timeout=self.config.timeout_seconds,
            )
        except httpx.TimeoutException as e:
            raise EmailDeliveryError(
                f"no response within {self.config.timeout_seconds}s",
                "timeout", context=context,
            ) from e
        except httpx.HTTPError as e:
            raise EmailDeliveryError(
                str(e) or type(e).__name__, "network", context=context,
            ) from e

        if response.is_success:
            logger.info(
                "Contact email accepted by Brevo",
                extra={
                    "contact_id": contact_id,
                    "provider_status": response.status_code,
                },
            )
            return NotificationResult(
                success=True, message=SUCCESS_MESSAGE, id=contact_id,
            )

        body = response.text[:_MAX_LOGGED_BODY]
        context.debug_info = {"provider_body": body}
        raise EmailDeliveryError(
            f"HTTP {response.status_code}: {body}",
            "http_status",
            provider_status=response.status_code,
            context=context,
        )
