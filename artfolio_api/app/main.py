"""
Main entrypoint for the Artfolio Marketplace API.

This module assembles the FastAPI application: it sets up logging,
CORS, request logging, the error taxonomy handlers and the versioned
router.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn artfolio_api.app.main:app --reload

The database schema is created or upgraded when the application
starts.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging


logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        logger.info("%s request for %s", request.method, request.url.path)
        return await call_next(request)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Apply migrations at startup.  This creates the database file if it
    # does not exist and brings the schema up to date.
    init_db()
    logger.info("Database ready")
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the modules below
    # can log during setup.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    origins = settings.cors_origin_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Authorization", "Content-Type"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)
    app.include_router(v1_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
