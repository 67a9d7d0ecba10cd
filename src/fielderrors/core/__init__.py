"""
Core error map and exception hierarchy.
"""

from .errors import ConfigurationError, FieldErrorsError, MissingTargetError, UnsupportedMessageError
from .map import FieldErrorMap, FieldMessage, Message

__all__ = [
    "ConfigurationError",
    "FieldErrorMap",
    "FieldErrorsError",
    "FieldMessage",
    "Message",
    "MissingTargetError",
    "UnsupportedMessageError",
]
