"""FastAPI server runner."""

from __future__ import annotations

import uvicorn
import structlog

from fii_core.api.app import app, get_config
from fii_core.logging.setup import configure_from

logger = structlog.get_logger("api")


def main() -> None:
    """Run the FastAPI server with host/port/logging from config."""
    config = get_config()
    configure_from(config.logging)

    logger.info("api_starting", host=config.api.host, port=config.api.port)

    try:
        uvicorn.run(
            app,
            host=config.api.host,
            port=config.api.port,
            log_config=None,  # Use our structlog setup
        )
    except Exception as e:
        logger.error("api_start_failed", error=str(e))
        raise


if __name__ == "__main__":
    main()
