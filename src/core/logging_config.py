"""Logging setup for the API process."""

import logging.config

from config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging once for the whole process.

    Args:
        level: Log level name, e.g. "INFO" or "DEBUG".
    """
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {"handlers": ["console"], "level": level},
            "loggers": {
                # SQL echo is too noisy at INFO
                "sqlalchemy.engine": {"level": "WARNING"},
            },
        }
    )
