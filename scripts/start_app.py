#!/usr/bin/env python3
"""Start the persona API under uvicorn, with startup errors sent to Logfire."""

import sys

import logfire
import uvicorn

from persona.config import Settings
from persona.util.logging import setup_logging
from persona.util.observability import configure_logfire


def main() -> int:
    """Configure observability, then serve the application."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting persona API", host=settings.host, port=settings.port
        )

        # Importing the app module builds the container and routes
        uvicorn.run(
            "persona.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
