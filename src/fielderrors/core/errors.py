"""
Exception hierarchy for fielderrors.
"""

from __future__ import annotations


class FieldErrorsError(Exception):
    """Base class for errors raised by fielderrors itself."""


class UnsupportedMessageError(FieldErrorsError, TypeError):
    """Raised when a field message is neither text, an exception nor None."""

    def __init__(self, field: str, message: object) -> None:
        self.field = field
        self.message_type = type(message)
        super().__init__(
            f"unsupported message type for field '{field}': "
            f"{self.message_type.__name__}, want str or exception"
        )


class MissingTargetError(FieldErrorsError, TypeError):
    """Raised when chain extraction is called without a target map."""


class ConfigurationError(FieldErrorsError, ValueError):
    """Raised when environment configuration holds an invalid value."""
