"""Resume Download: serves the bundled PDF resume verbatim.

Invariants:
    - Read-only and idempotent: identical bytes on every call, no side effects
    - File read per request from Settings.resume_path (redeploying the asset needs no restart)
    - Missing/unreadable file → ResumeUnavailableError (500), path only in logs
"""

import logging
from pathlib import Path
from urllib.parse import quote

from fastapi import APIRouter, Depends, Response

from personal_api.api.dependencies import get_app_settings
from personal_api.config import Settings
from personal_api.core.errors import ResumeUnavailableError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["resume"])

PDF_MEDIA_TYPE = "application/pdf"


def read_resume(path: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise ResumeUnavailableError(path) from e


def content_disposition(filename: str) -> str:
    """Inline disposition; non-ASCII names use the RFC 5987 filename* form."""
    filename = filename.replace('"', "")
    if filename.isascii():
        return f'inline; filename="{filename}"'
    fallback = filename.encode("ascii", "replace").decode("ascii").replace("?", "_")
    return f"inline; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


# Sync handler: FastAPI runs it in the threadpool, keeping file IO off the event loop
@router.get(
    "/resume",
    response_class=Response,
    responses={200: {"content": {PDF_MEDIA_TYPE: {}}}},
)
def get_resume(settings: Settings = Depends(get_app_settings)):
    """Return the resume PDF."""
    pdf_data = read_resume(settings.resume_path)
    return Response(
        content=pdf_data,
        media_type=PDF_MEDIA_TYPE,
        headers={"Content-Disposition": content_disposition(settings.resume_filename)},
    )
