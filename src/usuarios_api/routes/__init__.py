"""Route initialization module."""

from fastapi import APIRouter

from usuarios_api.routes.health import router as health_router
from usuarios_api.routes.root import router as root_router
from usuarios_api.routes.usuarios import router as usuarios_router

# Create main API router
api_router = APIRouter(prefix="/api")

# Include sub-routers
api_router.include_router(health_router)
api_router.include_router(usuarios_router)


__all__ = ["api_router", "root_router"]
