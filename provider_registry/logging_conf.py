# provider_registry/logging_conf.py
from __future__ import annotations
import logging
import logging.config
from typing import Any, Dict, Optional


def build_logging_config(level: str = "INFO") -> Dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "correlation": {"()": "provider_registry.middleware.correlation.CorrelationIdFilter"},
        },
        "formatters": {
            "basic": {
                "format": "%(asctime)s | %(levelname)-7s | %(name)s | %(correlation_id)s | %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "basic",
                "filters": ["correlation"],
                "level": level,
            },
        },
        "loggers": {
            "": {"handlers": ["console"], "level": level},
            "uvicorn": {"handlers": ["console"], "level": level, "propagate": False},
            "uvicorn.error": {"handlers": ["console"], "level": level, "propagate": False},
            "uvicorn.access": {"handlers": ["console"], "level": level, "propagate": False},
            "registry": {"handlers": ["console"], "level": level, "propagate": False},
            "httpx": {"level": "WARNING"},
        },
    }


def setup_logging(level: Optional[str] = None) -> None:
    if level is None:
        from .config import settings
        level = settings.log_level
    logging.config.dictConfig(build_logging_config(level.upper()))
