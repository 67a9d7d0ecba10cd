"""
Text and JSON encodings of field error maps.

``json_encoder`` depends on :mod:`fielderrors.core` and is imported on demand.
"""

from .text import ENTRY_SEPARATOR, FIELD_DELIMITER, NIL_TEXT, parse_errors

__all__ = ["ENTRY_SEPARATOR", "FIELD_DELIMITER", "NIL_TEXT", "parse_errors"]
