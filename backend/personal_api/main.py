"""personal-api: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PersonalApiError → structured JSON responses
    - CORS restricted to Settings.cors_origins; other origins never get CORS headers
    - Settings read once in create_app(): missing Brevo config fails startup, not requests
    - Brevo notifier (and its httpx.AsyncClient) created on startup, closed on shutdown

Design Decisions:
    - create_app(settings) factory: tests build apps with explicit settings;
      module-level `app` is what uvicorn imports
    - Access-log middleware added last so it wraps CORS and logs rejected preflights
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from personal_api.api.error_handlers import register_error_handlers
from personal_api.api.request_logging import register_request_logging
from personal_api.api.routes import contact, health, resume
from personal_api.config import Settings, get_settings
from personal_api.infrastructure.brevo_client import BrevoConfig, BrevoNotifier
from personal_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    async with httpx.AsyncClient() as http_client:
        app.state.notifier = BrevoNotifier(
            BrevoConfig.from_settings(settings), http_client,
        )
        logger.info(
            f"personal-api started (recipient={settings.recipient_email}, "
            f"cors_origins={settings.cors_origins})",
        )
        yield
        logger.info("personal-api shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="personal-api", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["content-type"],
    )
    register_request_logging(app)

    app.include_router(health.router)
    app.include_router(resume.router)
    app.include_router(contact.router)

    register_error_handlers(app)
    return app


app = create_app()
