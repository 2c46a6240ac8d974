"""Entry point for the Company API server.

Starts the FastAPI application under Uvicorn.  Host, port and log
level come from ``Settings`` (environment variables ``HOST``, ``PORT``
and ``LOG_LEVEL``).  Other options such as ``DATA_FILE`` or
``LOG_FILE`` are read the same way; see ``company_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from company_api.app.core.config import settings
from company_api.app.main import app

logger = logging.getLogger("company_api")


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Server is running on port %s", settings.port)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
