"""Service initialization and dependency injection."""

from fastapi import Request

from usuarios_api.config import Settings
from usuarios_api.services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """Get the user store owned by the running application.

    Args:
        request: Incoming request

    Returns:
        UserStore instance created by ``create_app``
    """
    return request.app.state.user_store


def get_app_settings(request: Request) -> Settings:
    """Get the settings the running application was built with."""
    return request.app.state.settings


__all__ = ["UserStore", "get_app_settings", "get_user_store"]
