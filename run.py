"""Entry point for the Developer API.

Serves the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``8000``); see ``developer_api/app/core/config.py`` for the other
settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from developer_api.app.core.config import settings
from developer_api.app.main import app


async def run_api() -> None:
    """Start the API server using Uvicorn.

    Uvicorn is given no logging config of its own so the handlers
    installed by ``create_app`` stay in effect.
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Developer API stopped")
