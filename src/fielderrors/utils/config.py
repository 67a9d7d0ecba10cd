"""Environment-driven configuration for fielderrors."""

from __future__ import annotations

import logging
import os

from ..core.errors import ConfigurationError

LOG_LEVEL_ENV = "FIELDERRORS_LOG_LEVEL"


def resolve_log_level(default: int = logging.WARNING, override: int | str | None = None) -> int:
    """
    Resolve the package log level.

    An explicit ``override`` wins, then the ``FIELDERRORS_LOG_LEVEL`` environment
    variable, then ``default``. Values may be level names (``"debug"``) or numbers.
    """

    if override is not None:
        return _coerce_level(override, source="override")
    value = os.getenv(LOG_LEVEL_ENV)
    if not value:
        return default
    return _coerce_level(value, source=LOG_LEVEL_ENV)


def _coerce_level(value: int | str, *, source: str) -> int:
    if isinstance(value, int):
        return value
    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Invalid log level {value!r} from {source}")
    return level
