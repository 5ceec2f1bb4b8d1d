"""Entry point for the Student Points API.

Starts the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example in Docker or under a
process manager where you only specify a single Python file to run.

Configuration is read from environment variables; ``PORT`` (default
``3000``) and ``HOST`` (default ``0.0.0.0``) control the listening
address and ``DATA_FILE`` the location of the roster JSON file.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from student_points_api.app.core.config import settings
from student_points_api.app.main import app


async def run_api() -> None:
    """Serve the API until the process is interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Keep the handlers installed by setup_logging.
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
