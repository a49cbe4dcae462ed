"""Logging configuration.

Modules log through ``logging.getLogger(__name__)``; this module routes those
records into loguru sinks so service output and audit events share one
formatter.
"""

import logging
import sys
from typing import Optional

from loguru import logger

from .settings import IcupaSettings


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


# Modules that should only log warnings and above
QUIET_MODULES = [
    "httpx",
    "httpcore",
    "asyncio",
]


def configure_logging(settings: Optional[IcupaSettings] = None) -> None:
    """Install loguru sinks and intercept stdlib logging."""
    from .settings import get_settings

    settings = settings or get_settings()
    level = settings.log_level.upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=settings.log_format, backtrace=False)

    if settings.log_file:
        logger.add(
            settings.log_file,
            level=level,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            enqueue=True,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for module in QUIET_MODULES:
        logging.getLogger(module).setLevel(logging.WARNING)
