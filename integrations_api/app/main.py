"""
Main entrypoint for the Integrations API.

This module assembles the FastAPI application, sets up logging,
registers the error handler and includes the ``/integrations``
router.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn integrations_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.router import router as integrations_router
from .core.config import settings
from .core.db import init_db
from .core.errors import IntegrationError, integration_error_handler
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Creates the database file if needed and applies pending migrations.
    init_db()
    logger.info("%s %s started", settings.project_name, settings.api_version)
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.add_exception_handler(IntegrationError, integration_error_handler)
    app.include_router(integrations_router)
    return app


app = create_app()
