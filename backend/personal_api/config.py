"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - BREVO_API_KEY, BREVO_SENDER_EMAIL, BREVO_SENDER_NAME are required:
      Settings() raises ValidationError without them, failing startup
    - get_settings() is cached (lru_cache), single read-only instance per process
    - Every non-secret setting has a local-development default
"""

from functools import lru_cache

from pydantic import EmailStr, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:3001",
    "http://localhost:8080",
    "http://localhost:8081",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:3001",
    "http://127.0.0.1:8080",
    "http://127.0.0.1:8081",
    "https://michaelhenry.me",
]


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, env_ignore_empty=True,
    )

    # Brevo (transactional email)
    brevo_api_key: str = Field(min_length=1)
    brevo_sender_email: EmailStr
    brevo_sender_name: str = Field(min_length=1)
    brevo_api_url: str = "https://api.brevo.com/v3/smtp/email"
    brevo_timeout_seconds: float = Field(10.0, gt=0)

    # Contact form recipient, falls back to the sender address
    contact_recipient_email: EmailStr | None = None
    contact_recipient_name: str = "Contact Form"

    # Resume
    resume_path: str = "assets/resume.pdf"
    resume_filename: str = "Michael Henry Resume - Staff Software Engineer.pdf"

    # API
    cors_origins: list[str] = DEFAULT_CORS_ORIGINS
    host: str = "0.0.0.0"
    port: int = Field(3030, ge=1, le=65535)

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def recipient_email(self) -> str:
        return self.contact_recipient_email or self.brevo_sender_email


@lru_cache
def get_settings() -> Settings:
    return Settings()
