"""
Logging for the racing package.

Handlers are attached to the ``racing`` logger rather than the root logger,
so an application embedding the repository keeps control of its own
logging. The level comes from RACING_LOG_LEVEL via config.

All modules should use `get_logger(__name__)` to obtain a logger instance.
"""

import logging
import sys

from racing.config import config

PACKAGE_LOGGER = "racing"

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def _init_logging() -> None:
    """Configure the package logger once."""
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    package = logging.getLogger(PACKAGE_LOGGER)
    package.setLevel(config.log_level)
    package.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger under the racing package.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A configured logging.Logger.
    """
    _init_logging()
    return logging.getLogger(name)
