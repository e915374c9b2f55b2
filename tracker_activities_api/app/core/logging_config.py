"""
Logging for the Tracker Activities API.

Records are emitted by module loggers under the ``tracker_activities_api``
namespace (``logging.getLogger(__name__)``).  ``configure_logging``
attaches handlers to that namespace logger only, so uvicorn keeps its
own access and error loggers and a host application's root logger is
left alone.
"""

import logging
from pathlib import Path

from .config import Settings

PACKAGE_LOGGER = "tracker_activities_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(settings: Settings) -> int:
    """``DEBUG`` wins over the configured level name; unknown names mean INFO."""
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level.upper(), logging.INFO)


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach console and optional file output to the package logger.

    Building several apps in one process (as the tests do) only updates
    the level: handlers are added the first time.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolve_level(settings))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    # Records are fully handled here; do not repeat them through the root logger.
    logger.propagate = False
    return logger
