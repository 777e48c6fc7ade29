"""Entry point for the Contact Directory API.

Launches the FastAPI application with Uvicorn.  Host and port are read
from the ``API_HOST`` and ``API_PORT`` environment variables (defaults
``0.0.0.0`` and ``8000``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from contact_directory_api.app.core.config import settings
from contact_directory_api.app.main import app


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


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Contact Directory API stopped")


if __name__ == "__main__":
    main()
