"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from usuarios_api.config import Settings, get_settings
from usuarios_api.errors import UsuariosAPIError
from usuarios_api.middleware import setup_middleware
from usuarios_api.routes import api_router, root_router
from usuarios_api.services.user_store import UserStore

logger = logging.getLogger(__name__)
db_logger = logging.getLogger("usuarios_api.db")


def configure_logging(log_level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    settings: Settings = app.state.settings

    # Startup
    logger.info("Aplicación: %s", settings.app_name)
    logger.info("DB server: %s", settings.db_host)
    db_logger.debug("Connected to the database...")
    logger.info("%s v%s started (environment=%s)", settings.app_name, settings.app_version, settings.environment)

    yield

    # Shutdown
    logger.info("%s shutting down", settings.app_name)


async def usuarios_error_handler(request: Request, exc: UsuariosAPIError) -> PlainTextResponse:
    """Answer store and validation errors with their plain-text message."""
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected errors and answer with a JSON 500."""
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


def mount_static(app: FastAPI, public_dir: str) -> None:
    """Serve files from ``public_dir`` for paths no route claims."""
    directory = Path(public_dir)
    if not directory.is_dir():
        logger.debug("Static directory %s not found, not serving static files", directory)
        return
    app.mount("/", StaticFiles(directory=directory, html=True), name="public")
    logger.info("Serving static files from %s", directory.resolve())


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Every call builds a new ``UserStore`` seeded with the initial records,
    so separate applications never share state.

    Args:
        settings: Settings to use; read from the environment when omitted

    Returns:
        A configured FastAPI application instance
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Usuarios - in-memory CRUD API",
        version=settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.user_store = UserStore()

    setup_middleware(app, settings)

    app.add_exception_handler(UsuariosAPIError, usuarios_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(root_router)
    app.include_router(api_router)

    # Mounted after the routes: GET / answers the greeting even if public/index.html exists
    mount_static(app, settings.public_dir)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    logger.info("Listening on port %s...", settings.port)
    uvicorn.run(
        "usuarios_api.main:app",
        host=settings.api_host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
