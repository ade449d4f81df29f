"""FastAPI dependencies shared by the routers."""

from fastapi import Request

from .settings import Settings


def get_app_settings(request: Request) -> Settings:
    """Return the settings the application was constructed with."""
    return request.app.state.settings
