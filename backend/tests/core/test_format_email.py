"""Contact Email Formatting: tests for the pure Brevo payload builder."""

from personal_api.core.domain_types import ContactSubmission
from personal_api.core.format_email import (
    EmailAddressing,
    format_contact_email,
    format_html,
    format_subject,
    format_text,
)

ADDRESSING = EmailAddressing(
    sender_email="sender@example.com",
    sender_name="Site Bot",
    recipient_email="owner@example.com",
    recipient_name="Contact Form",
)


def _submission(**overrides) -> ContactSubmission:
    fields = {
        "email": "a@b.com",
        "first_name": "John",
        "last_name": "Doe",
        "phone_number": "1234567890",
        "message": "hi",
    }
    fields.update(overrides)
    return ContactSubmission(**fields)


def test_payload_addresses_sender_recipient_and_reply_to():
    payload = format_contact_email(_submission(), "cid-1", ADDRESSING)
    assert payload["sender"] == {"name": "Site Bot", "email": "sender@example.com"}
    assert payload["to"] == [{"email": "owner@example.com", "name": "Contact Form"}]
    assert payload["replyTo"] == {"email": "a@b.com", "name": "John Doe"}


def test_subject_names_the_submitter():
    assert format_subject(_submission()) == "New Contact Form Submission from John Doe"


def test_html_includes_all_fields_and_contact_id():
    html = format_html(_submission(), "cid-42")
    for expected in ("cid-42", "John Doe", "a@b.com", "1234567890", "hi"):
        assert expected in html


def test_html_escapes_user_input():
    html = format_html(
        _submission(first_name="<script>", message="<b>bold</b> & more"),
        "cid",
    )
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "&lt;b&gt;bold&lt;/b&gt; &amp; more" in html


def test_html_converts_message_newlines_to_br():
    html = format_html(_submission(message="line one\nline two"), "cid")
    assert "line one<br>line two" in html


def test_missing_phone_rendered_as_not_provided():
    sub = _submission(phone_number="")
    assert "not provided" in format_html(sub, "cid")
    assert "Phone: not provided" in format_text(sub, "cid")


def test_text_content_keeps_message_verbatim():
    text = format_text(_submission(message="a < b\nc"), "cid")
    assert "Message:\na < b\nc" in text
