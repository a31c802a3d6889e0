"""Configuration management for the Usuarios API."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the project root.

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # This file is in src/usuarios_api/config.py
    project_dir = Path(__file__).parent.parent.parent
    return str(project_dir / ".env")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "usuarios-api"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "info"
    greeting: str = "Hola mundo desde FastAPI!"

    # Server
    api_host: str = "0.0.0.0"
    port: int = 3000

    # Database (reported at startup only)
    db_host: str = "localhost"

    # Static files
    public_dir: str = "public"

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in {"development", "dev", "local"}


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
