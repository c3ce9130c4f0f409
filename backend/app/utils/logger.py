"""
Logging setup.
Every module logs under the `bed_management` namespace, e.g.
`bed_management.beds` or `bed_management.ledger`.
"""
import logging
import logging.config
from typing import Any, Dict, Optional

from app.config import settings

ROOT_LOGGER = "bed_management"


def build_logging_config(level: str) -> Dict[str, Any]:
    """dictConfig schema for the bed_management loggers."""
    return {
        "version": 1,
        # uvicorn and sqlalchemy loggers created before us keep working
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "format": settings.LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
            },
        },
        "loggers": {
            ROOT_LOGGER: {"handlers": ["console"], "level": level},
        },
    }


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configures the bed_management logger tree.

    Safe to call more than once: dictConfig replaces the handlers instead
    of stacking them.

    Args:
        level: Level name, defaults to settings.LOG_LEVEL

    Returns:
        The bed_management logger
    """
    level = (level or settings.LOG_LEVEL).upper()
    logging.config.dictConfig(build_logging_config(level))
    return logging.getLogger(ROOT_LOGGER)
