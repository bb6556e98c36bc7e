import logging
import sys

import structlog
from structlog.contextvars import merge_contextvars

from monthcalc.config import settings


def _renderer():
    if str(settings.log_format).lower() == "console":
        return structlog.dev.ConsoleRenderer()

    return structlog.processors.JSONRenderer()


def configure_logging() -> None:
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=str(settings.log_level).upper(),
    )

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            _renderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def log():
    return structlog.get_logger()
