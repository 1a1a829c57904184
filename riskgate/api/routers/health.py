"""Health endpoint."""

from fastapi import APIRouter, Depends

from riskgate.api.dependencies import get_settings_dependency
from riskgate.api.models import HealthResponse
from riskgate.config.settings import Settings

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=settings.app_version)
