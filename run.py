"""Entry point for serving the Coffee API.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``8000``); everything else is
configured through the variables documented in
``coffee_api/app/core/config.py``.  A ``.env`` file is not read
automatically, export the variables before starting.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from coffee_api.app.core.config import settings
from coffee_api.app.main import app


async def run_api() -> None:
    """Start the Coffee API using Uvicorn."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.exception("Coffee API terminated unexpectedly")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
