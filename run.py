"""Entry point for the Partifuller RSVP service.

Starts the FastAPI application under uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``3000``), see ``partifuller.app.core.config``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from partifuller.app.core.config import settings
from partifuller.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
