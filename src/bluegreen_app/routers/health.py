# Health-check endpoints.

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from ..dependencies import get_app_settings
from ..settings import Settings

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str = Field("healthy", description="Always 'healthy' while serving.")
    version: str = Field(..., description="Deployed release variant.")


@router.api_route(
    "",
    methods=["GET", "HEAD"],
    status_code=status.HTTP_200_OK,
    response_model=HealthResponse,
)
async def read_health(
    settings: Settings = Depends(get_app_settings),
) -> HealthResponse:
    """Simple health-check endpoint used for readiness probes."""
    return HealthResponse(status="healthy", version=settings.version)
