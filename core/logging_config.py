# core/logging_config.py
"""Logging setup for the API process and client scripts."""
import logging
import logging.config

_configured = False

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger. Safe to call twice."""
    global _configured
    if _configured:
        logging.getLogger().setLevel(level.upper())
        return

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": LOG_FORMAT},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {
                "handlers": ["console"],
                "level": level.upper(),
            },
            "loggers": {
                # SQL echo is controlled by DEBUG on the engine instead
                "sqlalchemy.engine": {"level": "WARNING"},
            },
        }
    )
    _configured = True
