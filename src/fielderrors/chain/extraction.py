"""
Locate a :class:`FieldErrorMap` inside a chain of wrapped exceptions.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Set

from ..core.errors import MissingTargetError
from ..core.map import FieldErrorMap
from ..utils import get_logger

EXTRACTION_HOOK = "extract_field_errors"

logger = get_logger("chain.extraction")


def next_cause(err: Any) -> Optional[Any]:
    """
    Return the error wrapped by ``err``, or ``None`` at the end of the chain.

    An ``unwrap()`` method takes precedence. Otherwise the explicit
    ``__cause__`` is followed, then the implicit ``__context__`` unless it
    was suppressed with ``raise ... from None``.
    """

    unwrap = getattr(err, "unwrap", None)
    if callable(unwrap):
        return unwrap()
    cause = getattr(err, "__cause__", None)
    if cause is not None:
        return cause
    if getattr(err, "__suppress_context__", False):
        return None
    return getattr(err, "__context__", None)


def iter_chain(err: Optional[Any]) -> Iterator[Any]:
    """
    Yield ``err`` and every error reachable from it, each at most once.

    Members of an exception group are visited depth first, in order, before
    the group's own cause.
    """

    seen: Set[int] = set()
    yield from _walk(err, seen)


def _walk(err: Optional[Any], seen: Set[int]) -> Iterator[Any]:
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        if isinstance(err, BaseExceptionGroup):
            for member in err.exceptions:
                yield from _walk(member, seen)
        err = next_cause(err)


def extract_field_errors(err: Optional[Any], target: FieldErrorMap) -> bool:
    """
    Find the first :class:`FieldErrorMap` in ``err``'s chain and copy it into ``target``.

    An error in the chain may also expose ``extract_field_errors(target)``;
    when that hook returns ``True`` it is trusted to have filled ``target``.
    Returns ``False`` and leaves ``target`` untouched when nothing matches.
    """

    if target is None:
        raise MissingTargetError("target cannot be None")
    if not isinstance(target, FieldErrorMap):
        raise TypeError(f"target must be a FieldErrorMap, got {type(target).__name__}")

    for depth, current in enumerate(iter_chain(err)):
        if isinstance(current, FieldErrorMap):
            target.assign(current)
            logger.debug("Extracted %d field errors at depth %d", len(current), depth)
            return True
        hook = getattr(current, EXTRACTION_HOOK, None)
        if callable(hook) and hook(target):
            logger.debug("Extraction hook of %s matched at depth %d", type(current).__name__, depth)
            return True

    if err is not None:
        logger.debug("No field errors found in chain of %s", type(err).__name__)
    return False


def find_field_errors(err: Optional[Any]) -> Optional[FieldErrorMap]:
    target = FieldErrorMap()
    if extract_field_errors(err, target):
        return target
    return None
