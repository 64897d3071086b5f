"""
Web API runner

Loads .env, then starts the FastAPI server with uvicorn.
"""
import signal
import sys

import uvicorn
from dotenv import load_dotenv

# Load .env before settings are read
load_dotenv()

from tasklist.config.logging import get_logger  # noqa: E402
from tasklist.config.settings import settings  # noqa: E402

logger = get_logger("runner")


def signal_handler(signum, frame):
    """Handle termination signals"""
    logger.info("Received signal %s, shutting down...", signum)
    sys.exit(0)


def main():
    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    logger.info("Starting Tasklist API on %s:%s", settings.server.host, settings.server.port)
    logger.info("Task store: %s", settings.store.backend)
    if settings.store.backend == "sqlite":
        logger.info("Database: %s", settings.database.path)
    logger.info("Environment: %s", settings.env)

    uvicorn.run(
        "tasklist.api.app:app",
        host=settings.server.host,
        port=settings.server.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
