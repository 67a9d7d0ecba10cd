"""
Joined text form of a field error map: ``"field: message; field: message"``.
"""

from __future__ import annotations

from typing import Dict, Iterable, Tuple

from ..utils import get_logger

ENTRY_SEPARATOR = "; "
FIELD_DELIMITER = ": "
NIL_TEXT = "<nil>"
NESTED_TEMPLATE = "[{count} nested errors]"

logger = get_logger("serialization.text")


def render_entry(field: str, message: str) -> str:
    return f"{field}{FIELD_DELIMITER}{message}"


def join_entries(entries: Iterable[Tuple[str, str]]) -> str:
    return ENTRY_SEPARATOR.join(render_entry(field, message) for field, message in entries)


def nested_placeholder(count: int) -> str:
    return NESTED_TEMPLATE.format(count=count)


def parse_errors(text: str) -> Dict[str, str]:
    """
    Parse the joined text form back into a ``{field: message}`` mapping.

    Parsing is best effort. Empty segments and segments without a
    ``": "`` delimiter are skipped. Only the first delimiter in a segment
    splits it, so messages may themselves contain ``": "``. Later duplicate
    fields overwrite earlier ones.
    """

    result: Dict[str, str] = {}
    if not text:
        return result

    for part in text.split(ENTRY_SEPARATOR):
        if not part:
            continue
        field, delimiter, message = part.partition(FIELD_DELIMITER)
        if not delimiter:
            logger.debug("Skipping malformed segment %r", part)
            continue
        if field and message:
            result[field] = message
    return result
