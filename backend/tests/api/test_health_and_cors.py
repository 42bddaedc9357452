"""Health, CORS and access logging: app-level behavior independent of payloads.

Invariants:
    - GET /health → 200 regardless of Brevo configuration
    - Only allowlisted origins receive CORS headers; foreign preflights rejected
    - Every request emits one access log line with method, path, status
"""

import logging

from httpx import ASGITransport, AsyncClient

from personal_api.config import DEFAULT_CORS_ORIGINS, Settings
from personal_api.main import create_app

FOREIGN_ORIGIN = "https://evil.example.com"


# ─── Health ──────────────────────────────────────────────────────

async def test_health_ok(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_health_ignores_provider_configuration():
    """Unreachable provider URL and no notifier wired: health still answers."""
    settings = Settings(
        _env_file=None,
        brevo_api_key="revoked",
        brevo_sender_email="sender@example.com",
        brevo_sender_name="Nobody",
        brevo_api_url="http://127.0.0.1:9/unreachable",
    )
    app = create_app(settings)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        response = await c.get("/health")
    assert response.status_code == 200


# ─── CORS ────────────────────────────────────────────────────────

async def test_allowlisted_origin_gets_cors_headers(client):
    origin = "https://michaelhenry.me"
    assert origin in DEFAULT_CORS_ORIGINS

    response = await client.get("/health", headers={"origin": origin})

    assert response.headers["access-control-allow-origin"] == origin


async def test_allowlisted_preflight_accepted(client):
    response = await client.options("/contact", headers={
        "origin": "http://localhost:3000",
        "access-control-request-method": "POST",
        "access-control-request-headers": "content-type",
    })

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


async def test_foreign_preflight_rejected(client, fake_notifier):
    response = await client.options("/contact", headers={
        "origin": FOREIGN_ORIGIN,
        "access-control-request-method": "POST",
    })

    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers
    assert fake_notifier.calls == []


async def test_foreign_origin_gets_no_cors_headers_even_with_valid_payload(client, valid_contact):
    response = await client.post(
        "/contact", json=valid_contact, headers={"origin": FOREIGN_ORIGIN},
    )

    assert "access-control-allow-origin" not in response.headers


# ─── Access logging ──────────────────────────────────────────────

async def test_each_request_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="personal_api.access"):
        await client.get("/health")
        await client.get("/does-not-exist")

    records = [r for r in caplog.records if r.name == "personal_api.access"]
    assert [(r.method, r.path, r.status_code) for r in records] == [
        ("GET", "/health", 200),
        ("GET", "/does-not-exist", 404),
    ]
    assert all(r.duration_ms >= 0 for r in records)
