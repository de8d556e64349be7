"""
Main entrypoint for the Stars API.

This module assembles the FastAPI application, sets up logging, wires
the star store into the service layer and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn stars_api.app.main:app --reload

The store is opened when the application starts (creating the
``stars`` table if needed) and closed when it shuts down.  A store
that cannot be opened aborts startup.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.db import StarStore
from .core.logging_config import setup_logging
from .services.star_service import StarService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the process-wide settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that startup can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    store = StarStore(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store.open()
        try:
            yield
        finally:
            store.close()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.star_service = StarService(store)

    app.include_router(router)

    logger.debug("Created %s %s", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can find it.
app = create_app()
