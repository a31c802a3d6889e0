"""Models package."""

from usuarios_api.models.health import HealthCheckResponse
from usuarios_api.models.usuario import Usuario, UsuarioIn

__all__ = [
    "HealthCheckResponse",
    "Usuario",
    "UsuarioIn",
]
