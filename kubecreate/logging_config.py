"""
Custom logging configuration that keeps bearer tokens out of log output
"""

import logging
import logging.config
import re
from typing import Dict, Any

_BEARER_RE = re.compile(r"(Bearer\s+)[A-Za-z0-9._~+/=-]+")


class RedactAuthorizationFilter(logging.Filter):
    """Filter to mask bearer tokens in log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Rewrite the message in place; never drops a record."""
        message = record.getMessage()
        if "Bearer" in message:
            record.msg = _BEARER_RE.sub(r"\1***", message)
            record.args = None
        return True


def get_logging_config(level: str = "WARNING") -> Dict[str, Any]:
    """Get logging configuration for the kubecreate loggers."""
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "redact_authorization": {
                "()": RedactAuthorizationFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
                "filters": ["redact_authorization"]
            }
        },
        "loggers": {
            "kubecreate": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            },
            "httpx": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "WARNING") -> None:
    logging.config.dictConfig(get_logging_config(level))
