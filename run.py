"""Entry point for serving the Rumbl web application.

Host and port come from ``HOST`` and ``PORT`` (see
``rumbl.app.core.config``).  Defaults are ``0.0.0.0`` and ``4000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from rumbl.app.core.config import settings
from rumbl.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
