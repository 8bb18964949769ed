"""Logging setup for Rumus.

Every module obtains its logger through get_logger() so that all records live
under the "rumus" namespace and can be configured in one place.
"""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

ROOT_LOGGER_NAME = "rumus"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace (e.g. rumus.parser)."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Configure the package logger.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR). Defaults to RUMUS_LOG_LEVEL.
        log_file: Optional path; records go to this file instead of stderr.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel((level or LOG_LEVEL).upper())

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
