"""Entry point for the Artfolio Marketplace API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration (``DATABASE_URL``, ``SECRET_KEY``, ``CORS_ORIGINS`` ...)
is read from environment variables by ``artfolio_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os
from uvicorn import Config, Server

from artfolio_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Host and port are read from environment variables `HOST` and
    `PORT`. Defaults are `0.0.0.0` and `3000`.
    """
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


async def main() -> None:
    logging.getLogger(__name__).info("Starting Artfolio Marketplace API")
    await run_api()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
