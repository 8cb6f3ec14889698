"""Application factory for the pathecho FastAPI app."""
from __future__ import annotations

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from pathecho import __version__
from pathecho.core.errors import AppError, app_error_handler, http_error_handler
from pathecho.core.logging import get_logger, setup_logging
from pathecho.core.settings import Settings, get_settings
from pathecho.routers import echo as echo_router
from pathecho.routers import health as health_router


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level, debug=settings.debug)

    app = FastAPI(
        title="pathecho API",
        version=__version__,
        description="Echoes a URL path segment back as plain text",
    )
    app.state.settings = settings

    # Include routers
    app.include_router(echo_router.router, prefix=settings.api_prefix)
    app.include_router(health_router.router, prefix=settings.api_prefix)

    # Error handlers
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    get_logger(__name__).info(
        "pathecho app created (environment=%s, prefix=%r)",
        settings.environment,
        settings.api_prefix,
    )
    return app


app = create_app()
