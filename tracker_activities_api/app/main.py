"""
Main entrypoint for the Tracker Activities API.

This module assembles the FastAPI application: it sets up logging,
prepares the database, registers the error handlers and includes the
versioned routers.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``
so it can be served with uvicorn, e.g.::

    uvicorn tracker_activities_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.endpoints import health
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.errors import register_exception_handlers
from .core.logging_config import configure_logging


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time; tests pass their own to point the
        app at a temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    settings = settings or default_settings
    configure_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings

    # The schema must exist before the first request; a connection is
    # opened per request by ``get_db``.
    database = Database(settings.database_url)
    database.init_schema()
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(v1_router, prefix=settings.api_prefix)
    app.include_router(health.router, prefix="/api", tags=["health"])

    return app


app = create_app()
