"""Root conftest: shared test configuration and fixtures.

Invariants:
    - Fake Brevo credentials set before personal_api.main is imported
      (module-level app reads Settings at import time)
    - Every route test builds its own app from explicit Settings
    - The notifier is always overridden: no test reaches the real Brevo API
"""

import os

# Ensure tests don't accidentally use real API keys
os.environ.setdefault("BREVO_API_KEY", "xkeysib-test-fake-key")
os.environ.setdefault("BREVO_SENDER_EMAIL", "sender@example.com")
os.environ.setdefault("BREVO_SENDER_NAME", "Test Sender")

import pytest
from httpx import ASGITransport, AsyncClient

from personal_api.api.dependencies import get_notifier
from personal_api.config import Settings
from personal_api.core.domain_types import NotificationResult
from personal_api.core.errors import EmailDeliveryError
from personal_api.infrastructure.brevo_client import SUCCESS_MESSAGE
from personal_api.main import create_app

RESUME_BYTES = b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\n%%EOF\n"

VALID_CONTACT = {
    "email": "a@b.com",
    "firstName": "John",
    "lastName": "Doe",
    "phoneNumber": "1234567890",
    "message": "hi",
}


class FakeNotifier:
    """Records send() calls; succeeds unless `error` is set."""

    def __init__(self):
        self.calls = []
        self.error: EmailDeliveryError | None = None

    async def send(self, submission, contact_id):
        self.calls.append({"submission": submission, "contact_id": contact_id})
        if self.error is not None:
            raise self.error
        return NotificationResult(
            success=True, message=SUCCESS_MESSAGE, id=contact_id,
        )


@pytest.fixture
def valid_contact() -> dict:
    return dict(VALID_CONTACT)


@pytest.fixture
def resume_bytes() -> bytes:
    return RESUME_BYTES


@pytest.fixture
def resume_file(tmp_path, resume_bytes):
    path = tmp_path / "resume.pdf"
    path.write_bytes(resume_bytes)
    return path


@pytest.fixture
def settings(resume_file) -> Settings:
    return Settings(
        _env_file=None,
        brevo_api_key="xkeysib-test-fake-key",
        brevo_sender_email="sender@example.com",
        brevo_sender_name="Test Sender",
        contact_recipient_email="owner@example.com",
        resume_path=str(resume_file),
        resume_filename="Test Resume.pdf",
    )


@pytest.fixture
def fake_notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def app(settings, fake_notifier):
    application = create_app(settings)
    application.dependency_overrides[get_notifier] = lambda: fake_notifier
    return application


@pytest.fixture
async def client(app):
    """FastAPI test client with the notifier dependency overridden."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
