"""
fielderrors public package initialization.

Collect per-field errors into a :class:`FieldErrorMap`, raise it like any
other exception, and recover it later from a wrapped exception chain.
"""

from .chain import extract_field_errors, find_field_errors, iter_chain  # noqa: F401
from .core import (
    ConfigurationError,
    FieldErrorMap,
    FieldErrorsError,
    FieldMessage,
    MissingTargetError,
    UnsupportedMessageError,
)  # noqa: F401
from .serialization import parse_errors  # noqa: F401
from .serialization.json_encoder import FieldErrorsJSONEncoder  # noqa: F401
from .utils import configure_logging  # noqa: F401

__all__ = [
    "FieldErrorMap",
    "FieldMessage",
    "FieldErrorsError",
    "UnsupportedMessageError",
    "MissingTargetError",
    "ConfigurationError",
    "parse_errors",
    "FieldErrorsJSONEncoder",
    "extract_field_errors",
    "find_field_errors",
    "iter_chain",
    "configure_logging",
]
