"""
Main entrypoint for the User Records API.

This module assembles the FastAPI application, sets up logging,
registers exception handlers and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn user_records_api.app.main:app --port 8080

The SQLite connection is opened on startup, shared by all requests
through ``app.state.user_repository`` and closed on shutdown.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import settings
from .core.db import get_connection, get_database_path, init_db
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging
from .repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def create_app(database_path: Optional[str] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    database_path : Optional[str]
        SQLite database to use instead of ``settings.database_url``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging()

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    register_exception_handlers(app)
    app.include_router(router)

    @app.on_event("startup")
    async def open_store() -> None:
        db_path = get_database_path(database_path)
        conn = get_connection(db_path)
        init_db(conn)
        app.state.user_repository = UserRepository(conn)
        logger.info("Using database %s", db_path)

    @app.on_event("shutdown")
    async def close_store() -> None:
        repository = getattr(app.state, "user_repository", None)
        if repository is not None:
            repository.conn.close()

    return app


app = create_app()
