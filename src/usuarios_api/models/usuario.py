"""Usuario models."""

from typing import ClassVar

from pydantic import BaseModel, Field


class Usuario(BaseModel):
    """User record held by the store."""

    id: int = Field(..., gt=0, description="Unique identifier for the user")
    nombre: str = Field(..., description="Name of the user")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "id": 1,
                "nombre": "Juan",
            }
        }


class UsuarioIn(BaseModel):
    """Incoming user payload for create and update."""

    nombre: str = Field(..., min_length=3, description="Name of the user, at least 3 characters")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "nombre": "Karen",
            }
        }
