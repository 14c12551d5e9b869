# =============================================================================
# app/__main__.py - Server Launcher
# =============================================================================
# Usage:
#   poetry run python -m app
#
# Exits with status 1 when required configuration is missing.
# =============================================================================

import logging
import sys

import uvicorn

from app.exceptions import ConfigurationError

logger = logging.getLogger("app")


def main() -> None:
    try:
        from app.config import settings
    except ConfigurationError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(str(e))
        sys.exit(1)

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.REVIEW_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
