"""Greeting endpoint reporting which release variant is serving."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from ..dependencies import get_app_settings
from ..settings import Settings

router = APIRouter(tags=["greeting"])


class GreetingResponse(BaseModel):
    message: str = Field(..., description="Human readable greeting.")
    version: str = Field(..., description="Deployed release variant.")
    timestamp: str = Field(
        ..., description="UTC time the request was handled, ISO-8601 with milliseconds."
    )


def _utc_timestamp(now: datetime | None = None) -> str:
    """Format ``now`` like ``2026-10-17T09:15:02.123Z``."""
    moment = now if now is not None else datetime.now(timezone.utc)
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


@router.api_route(
    "/",
    methods=["GET", "HEAD"],
    status_code=status.HTTP_200_OK,
    response_model=GreetingResponse,
)
async def read_greeting(
    settings: Settings = Depends(get_app_settings),
) -> GreetingResponse:
    return GreetingResponse(
        message=f"Hello from {settings.version} version!",
        version=settings.version,
        timestamp=_utc_timestamp(),
    )
