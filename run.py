"""Entry point for the Integrations API.

Serves the FastAPI application with Uvicorn.  Host, port and the
database location are read from environment variables (``HOST``,
``PORT``, ``DATABASE_URL``); see ``integrations_api/app/core/config.py``
for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from integrations_api.app.core.config import settings
from integrations_api.app.main import app


async def main() -> None:
    """Run the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Handlers come from setup_logging, called by create_app.
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
