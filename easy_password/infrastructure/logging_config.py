"""Structured logging setup"""

import logging
import sys
from typing import Optional

import structlog

from easy_password.infrastructure.config import get_settings


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure structlog on top of the standard library logger.

    Nothing calls this implicitly; applications embedding the library
    decide whether they want its JSON log lines.

    Args:
        level: Log level name, defaults to the EASY_PASSWORD_LOG_LEVEL setting
    """
    level = (level or get_settings().log_level).upper()

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    logging.getLogger("easy_password").setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
