"""ICUPA API entry point."""

import logging

import uvicorn

from ..config.logging_config import configure_logging
from ..config.settings import get_settings
from .app import create_app

settings = get_settings()
configure_logging(settings)

logger = logging.getLogger(__name__)

app = create_app(settings=settings)


def main() -> None:
    """Run the application."""
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    uvicorn.run(
        "icupa_core.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
