# Application factory and FastAPI setup.

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .routers import greeting, health
from .settings import Settings, get_settings


async def _method_not_allowed_as_not_found(
    request: Request, exc: Exception
) -> Response:
    """Answer unsupported methods on known paths like unknown paths."""
    return await http_exception_handler(
        request, StarletteHTTPException(status_code=status.HTTP_404_NOT_FOUND)
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application instance.

    When ``settings`` is omitted the cached environment-derived settings are
    used. Either way the instance is fixed for the lifetime of the app.
    """
    app = FastAPI(
        title="Blue/Green App",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.settings = settings if settings is not None else get_settings()

    app.add_exception_handler(
        status.HTTP_405_METHOD_NOT_ALLOWED, _method_not_allowed_as_not_found
    )
    app.include_router(greeting.router)
    app.include_router(health.router)
    return app
