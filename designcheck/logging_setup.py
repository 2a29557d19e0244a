"""Logging for the design validation service.

`configure_logging()` installs one stdout handler through `dictConfig`. The
service's own loggers (`designcheck.*`) follow the configured level; the root
and uvicorn loggers never go below INFO.
"""

from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Any, Dict

LOG_FORMAT = "%(asctime)s %(levelname)s:%(name)s:%(message)s"
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def build_logging_config(level: str = "INFO") -> Dict[str, Any]:
    level = level.upper()
    quiet = level if logging.getLevelName(level) >= logging.INFO else "INFO"
    loggers: Dict[str, Any] = {"designcheck": {"level": level}}
    for name in _UVICORN_LOGGERS:
        loggers[name] = {"level": quiet, "handlers": ["console"], "propagate": False}
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": quiet, "handlers": ["console"]},
        "loggers": loggers,
    }


def configure_logging(level: str = "INFO") -> None:
    """Install the handler once; later calls only adjust the service level.

    When the root logger already has handlers (a reloader, pytest's capture)
    they are left in place.
    """
    if logging.getLogger().handlers:
        logging.getLogger("designcheck").setLevel(level.upper())
        return
    dictConfig(build_logging_config(level))


__all__ = ["build_logging_config", "configure_logging", "LOG_FORMAT"]
