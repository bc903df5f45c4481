#!/usr/bin/env python3
"""Serve Media Ranker under uvicorn, reporting startup failures to Logfire."""

import sys
import logfire
import uvicorn

from ranker.config import Settings
from ranker.util.observability import configure_logfire


def main() -> int:
    """Configure Logfire, then hand the app over to uvicorn."""
    settings = Settings()

    # Must happen before the app module is imported by uvicorn
    configure_logfire(settings)

    bind_host = "127.0.0.1" if settings.environment == "development" else "0.0.0.0"

    try:
        logfire.info(
            "Starting Media Ranker",
            environment=settings.environment,
            base_url=settings.api.base_url,
            git_sha=settings.git_sha,
        )

        uvicorn.run(
            "ranker.interface.api.app:app",
            host=bind_host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            reload=settings.environment == "development" and settings.debug,
        )

        return 0

    except Exception as e:
        logfire.error(
            "Media Ranker failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
