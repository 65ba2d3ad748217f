"""Health and version endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from legislator_lookup import __version__
from legislator_lookup.core.config import Settings, get_settings
from legislator_lookup.schemas.common import HealthResponse, InfoResponse

health_router = APIRouter(tags=["health"])


@health_router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


@health_router.get("/info", response_model=InfoResponse)
async def info(
    settings: Annotated[Settings, Depends(get_settings)],
) -> InfoResponse:
    """Return application version and environment."""
    return InfoResponse(version=__version__, environment=settings.environment)
