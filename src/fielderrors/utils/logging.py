"""Logging helpers for fielderrors."""

from __future__ import annotations

import logging

from .config import resolve_log_level

PACKAGE_LOGGER = "fielderrors"


def configure_logging(level: int | str | None = None) -> None:
    """
    Attach a stream handler to the package logger and set its level.

    The handler is added once; the level is applied on every call, an
    explicit ``level`` winning over ``FIELDERRORS_LOG_LEVEL``.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(resolve_log_level(override=level))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
