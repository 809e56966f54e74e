"""
Centralized logging configuration for the marina inventory manager.

Every module gets its logger from ``get_logger(__name__)``, so all loggers
live under the ``marina`` namespace. Handlers write to stderr, which keeps
the inventory listing and operator replies on stdout free of diagnostics.
``set_level`` changes the level of every ``marina`` logger in one call; the
CLI uses it for ``--log-level`` / ``MARINA_LOG_LEVEL``.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default INFO)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def set_level(level: int | str) -> None:
    """Change the level of every logger created under the ``marina`` namespace."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    for name, obj in logging.Logger.manager.loggerDict.items():
        if isinstance(obj, logging.Logger) and (name == "marina" or name.startswith("marina.")):
            obj.setLevel(level)
