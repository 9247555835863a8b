import logging
from logging.config import dictConfig

from geo_cql.config import Configuration

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "level": "DEBUG",
        }
    },
    "loggers": {
        "geo_cql": {
            "handlers": ["console"],
            "level": Configuration.log_level,
            "propagate": True,
        }
    },
}

_configured = False

def configure_logging() -> None:
    global _configured
    if not _configured:
        dictConfig(LOGGING_CONFIG)
        _configured = True


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
