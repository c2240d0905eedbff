"""Logging setup for the gidiary package.

Library modules only ever call ``logging.getLogger(__name__)``. Where the
records end up is decided once, by whoever starts the application (or by a
test), through ``configure_logging``.
"""
import logging
from typing import Optional

from gidiary.utilities.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
ROOT_LOGGER_NAME = "gidiary"


def configure_logging(level: Optional[str] = None,
                      handler: Optional[logging.Handler] = None) -> logging.Logger:
    """Attach ``handler`` (a stderr stream handler by default) to the package logger.

    Calling it again replaces the previously attached handler instead of
    stacking a second one.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    if handler is None:
        handler = logging.StreamHandler()
    if handler.formatter is None:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel((level or LOG_LEVEL).upper())
    logger.propagate = False
    return logger


__all__ = ["configure_logging", "LOG_FORMAT", "ROOT_LOGGER_NAME"]
