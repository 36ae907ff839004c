"""
Main entrypoint for the Developer API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds and configures the
app around a ``DeveloperRepository``; a default instance is created at
module import time as ``app`` so it can be served directly, e.g.::

    uvicorn developer_api.app.main:app --reload
"""

import logging
import sqlite3
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.endpoints import health
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .services.developer_service import DeveloperRepository

logger = logging.getLogger(__name__)


def create_app(
    repository: Optional[DeveloperRepository] = None,
    api_prefix: Optional[str] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    repository : Optional[DeveloperRepository]
        Persistence handle used by every route.  When omitted, a
        repository over ``settings.database_url`` is created.
    api_prefix : Optional[str]
        Prefix for the developer routes; defaults to
        ``settings.api_prefix``.  ``/health`` is never prefixed.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.repository = repository or DeveloperRepository()

    if api_prefix is None:
        api_prefix = settings.api_prefix
    app.include_router(health.router, tags=["health"])
    app.include_router(v1_router, prefix=api_prefix.rstrip("/"))

    @app.exception_handler(sqlite3.Error)
    async def store_failure_handler(request: Request, exc: sqlite3.Error) -> JSONResponse:
        logger.error(
            "Database error on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error"},
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file and the developers table if needed.
        app.state.repository.init_db()
        logger.info("Database ready at %s", app.state.repository.db_path)

    return app


app = create_app()
