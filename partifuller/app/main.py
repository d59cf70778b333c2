"""
Main entrypoint for the Partifuller RSVP service.

This module assembles the FastAPI application, sets up logging and
includes the HTML pages and the versioned JSON API.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn partifuller.app.main:app --reload

or through ``run.py`` which reads the host and port from ``Settings``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.db import Database, init_db
from .core.logging_config import setup_logging
from .services.renderer import ViewRenderer
from .web.pages import router as pages_router

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.
        Tests pass their own to point at a temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that the startup hooks
    # below can log.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # A store that cannot be opened or migrated is fatal; let it raise.
        init_db(app.state.database)
        app.state.renderer.check()
        logger.info("RSVP store ready at %s", app.state.database.path)
        yield

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.database = Database(app_settings.database_url)
    app.state.renderer = ViewRenderer(app_settings.templates_dir, title=app_settings.project_name)

    app.include_router(pages_router)
    app.include_router(v1_router, prefix="/api/v1")
    app.mount("/static", StaticFiles(directory=app_settings.static_dir), name="static")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
