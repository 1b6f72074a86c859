"""
Main entrypoint for the Bookstore API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds and configures the
app, which is then instantiated at import time as ``app`` so it can be
served directly, e.g.::

    uvicorn bookstore_api.app.main:app --reload

The title and version come from ``Settings`` in ``core.config``.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .core.store import init_store


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Seed the in-memory catalog, reviews and users before serving.
    init_store()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging first so later imports can log, installs CORS for
    the storefront origins and mounts the v1 routes under ``/api/v1``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/health", tags=["health"])
    async def health_check() -> dict:
        return {"status": "ok"}

    return app


# Created at import time so uvicorn can discover it without calling
# create_app manually.
app = create_app()
