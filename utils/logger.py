"""Logging configuration."""

import logging
import sys
from typing import Optional

from config.settings import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Driver/client loggers that are chatty at INFO
QUIET_LOGGERS = ("pymongo", "httpx", "openai")


def setup_logger(name: str = __name__, level: Optional[str] = None) -> logging.Logger:
    """Return a logger writing to stdout at ``level`` (defaults to LOG_LEVEL)."""
    level_value = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logger = logging.getLogger(name)
    logger.setLevel(level_value)
    logger.propagate = False

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level_value)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    for noisy in QUIET_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logger
