"""Contact Email Formatting: builds the transactional email payload for a submission.

Invariants:
    - PURE: takes a validated submission + addressing, returns a JSON-ready dict
    - Every user-supplied value is HTML-escaped before it enters htmlContent
    - Message newlines rendered as <br> in HTML, kept verbatim in textContent
    - replyTo is always the submitter
"""

from dataclasses import dataclass
from html import escape

from personal_api.core.domain_types import ContactSubmission


@dataclass(frozen=True)
class EmailAddressing:
    sender_email: str
    sender_name: str
    recipient_email: str
    recipient_name: str


def format_subject(submission: ContactSubmission) -> str:
    return f"New Contact Form Submission from {submission.full_name}"


def format_html(submission: ContactSubmission, contact_id: str) -> str:
    message_html = "<br>".join(
        escape(line) for line in submission.message.split("\n")
    )
    phone = escape(submission.phone_number) or "<em>not provided</em>"
    return (
        "<h2>New Contact Form Submission</h2>\n"
        f"<p><strong>Contact ID:</strong> {escape(contact_id)}</p>\n"
        f"<p><strong>Name:</strong> {escape(submission.full_name)}</p>\n"
        f"<p><strong>Email:</strong> {escape(submission.email)}</p>\n"
        f"<p><strong>Phone:</strong> {phone}</p>\n"
        "<p><strong>Message:</strong></p>\n"
        f"<p>{message_html}</p>\n"
        "<hr>\n"
        "<p><em>This message was sent from your website contact form.</em></p>\n"
    )


def format_text(submission: ContactSubmission, contact_id: str) -> str:
    return (
        "New Contact Form Submission\n\n"
        f"Contact ID: {contact_id}\n"
        f"Name: {submission.full_name}\n"
        f"Email: {submission.email}\n"
        f"Phone: {submission.phone_number or 'not provided'}\n\n"
        f"Message:\n{submission.message}\n"
    )


def format_contact_email(
    submission: ContactSubmission,
    contact_id: str,
    addressing: EmailAddressing,
) -> dict:
    """Build the Brevo /v3/smtp/email request body."""
    return {
        "sender": {
            "name": addressing.sender_name,
            "email": addressing.sender_email,
        },
        "to": [{
            "email": addressing.recipient_email,
            "name": addressing.recipient_name,
        }],
        "replyTo": {
            "email": submission.email,
            "name": submission.full_name,
        },
        "subject": format_subject(submission),
        "htmlContent": format_html(submission, contact_id),
        "textContent": format_text(submission, contact_id),
    }
