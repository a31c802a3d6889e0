"""Middleware setup for the FastAPI application."""

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from usuarios_api.config import Settings

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("usuarios_api.access")


def format_access_line(method: str, url: str, status_code: int, content_length: str | None, elapsed_ms: float) -> str:
    """Format one request in the compact ``tiny`` access-log layout.

    Args:
        method: HTTP method
        url: Request path with query string
        status_code: Response status code
        content_length: Response Content-Length header, if any
        elapsed_ms: Time spent producing the response

    Returns:
        Access log line, e.g. ``GET /api/usuarios 200 77 - 1.234 ms``
    """
    return f"{method} {url} {status_code} {content_length or '-'} - {elapsed_ms:.3f} ms"


async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Log each request once its response is ready."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000

    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"

    access_logger.info(
        format_access_line(
            request.method,
            url,
            response.status_code,
            response.headers.get("content-length"),
            elapsed_ms,
        )
    )
    return response


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Setup middleware for the FastAPI application.

    Request logging is only enabled in development environments.

    Args:
        app: FastAPI application instance
        settings: Application settings; only ``is_development`` is read
    """
    if not settings.is_development:
        logger.info("Request logging disabled (environment=%s)", settings.environment)
        return

    app.middleware("http")(log_requests)
    logging.getLogger("usuarios_api.startup").debug("Request logging enabled...")
