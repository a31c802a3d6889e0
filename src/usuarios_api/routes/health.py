"""Health check routes."""

from fastapi import APIRouter, Depends

from usuarios_api.config import Settings
from usuarios_api.models.health import HealthCheckResponse
from usuarios_api.services import get_app_settings, get_user_store
from usuarios_api.services.user_store import UserStore

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    settings: Settings = Depends(get_app_settings),
    store: UserStore = Depends(get_user_store),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and current record count
    """
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        usuarios=len(store),
    )
