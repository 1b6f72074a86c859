"""Entry point for serving the Bookstore API.

Starts the FastAPI application under Uvicorn.  Intended to be executed
from the project root, for example in Docker where you only specify a
single Python file to run.

Host and port are read from ``API_HOST`` and ``API_PORT`` (defaults
``127.0.0.1`` and ``8000``); see ``bookstore_api.app.core.config`` for the
other supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from bookstore_api.app.core.config import settings
from bookstore_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Bookstore API stopped")
