"""Route Dependencies: hand app-scoped objects to route handlers.

Invariants:
    - Settings attached to app.state by create_app(); Notifier by the lifespan
    - Handlers receive collaborators through Depends, so tests override them
"""

from fastapi import Request

from personal_api.config import Settings
from personal_api.services.submit_contact import Notifier


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier
