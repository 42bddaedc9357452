"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 while the process is up
    - Never consults Brevo or any other configuration: liveness only
"""

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "ok"}
