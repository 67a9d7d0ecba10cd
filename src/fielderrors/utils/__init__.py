"""
Utility helpers shared across fielderrors packages.
"""

from .config import LOG_LEVEL_ENV, resolve_log_level
from .logging import configure_logging, get_logger

__all__ = ["LOG_LEVEL_ENV", "configure_logging", "get_logger", "resolve_log_level"]
