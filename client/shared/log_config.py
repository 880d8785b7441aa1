"""
Logging setup for the notes client core.

Modules log through ``logging.getLogger(__name__)``; this only configures
the root handler once at startup.
"""

import logging
from typing import Optional

from .config import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: Optional[str] = None, settings: Optional[Settings] = None) -> None:
    """
    Configure root logging.

    Args:
        level: Level name override (e.g. "DEBUG"). Defaults to DEBUG when
            the ``debug`` setting is on, otherwise to ``log_level``.
        settings: Settings to read; defaults to ``get_settings()``.
    """
    settings = settings or get_settings()
    if level is None:
        level = "DEBUG" if settings.debug else settings.log_level
    level_name = level.upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger().setLevel(log_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
