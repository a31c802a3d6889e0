"""Pytest configuration and fixtures."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from usuarios_api.config import Settings
from usuarios_api.main import create_app
from usuarios_api.services.user_store import UserStore


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings for a development app with no static directory."""
    return Settings(
        app_name="usuarios-api-test",
        environment="development",
        public_dir=str(tmp_path / "missing-public"),
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Create a fresh application with its own seeded store."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def store(app: FastAPI) -> UserStore:
    """The store owned by ``app``."""
    return app.state.user_store
