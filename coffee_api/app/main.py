"""
Main entrypoint for the Coffee API.

This module assembles the FastAPI application, sets up logging,
builds the configured coffee store and includes versioned routers.
``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn coffee_api.app.main:app --reload

or through ``run.py`` at the project root.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.data_loader import build_store, load_sample_data


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module‑level settings
        read from environment variables.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The store is
        opened and seeded when the application starts up.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the store and
    # routers can log during startup.
    setup_logging(settings.log_level, settings.log_file or None)

    store = build_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await store.open()
        if settings.load_sample_data:
            await load_sample_data(store)
        logger.info("%s started with %s storage", settings.project_name, settings.storage)
        try:
            yield
        finally:
            await store.close()
            logger.info("%s stopped", settings.project_name)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.coffee_store = store

    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
