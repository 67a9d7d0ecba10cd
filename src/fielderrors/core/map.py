"""
Field error map: an exception aggregating per-field errors.
"""

from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from ..serialization.text import NIL_TEXT, join_entries, nested_placeholder, parse_errors
from ..utils import get_logger
from .errors import UnsupportedMessageError

Message = Union[str, BaseException, None]

logger = get_logger("core.map")


class FieldMessage(Exception):
    """
    Plain text error stored for a field.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldMessage):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)


class FieldErrorMap(Exception):
    """
    Aggregated error storing a field-to-error mapping.

    A map created without arguments is *uninitialized*: it has no backing
    storage and renders as ``"<nil>"``. Every read behaves as if it were
    empty. Any mutation allocates the storage first, so a map built up with
    :meth:`set` never needs explicit construction. A map is not safe to
    share between threads without external locking.

    Because the map is itself an exception it can be raised directly, or
    projected with :meth:`as_error` which yields ``None`` while empty.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, errors: Optional[Mapping[str, Message]] = None) -> None:
        super().__init__()
        self._errors: Optional[Dict[str, BaseException]] = None
        if errors is not None:
            self._ensure_storage()
            for field, message in errors.items():
                self.set(field, message)

    @classmethod
    def parse(cls, text: str) -> "FieldErrorMap":
        """
        Build an initialized map from the joined text form.
        """

        return cls(parse_errors(text))

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #
    def set(self, field: str, message: Message) -> None:
        """
        Record ``message`` for ``field``, replacing any previous error.

        Text is wrapped in a :class:`FieldMessage`; exceptions are stored as
        they are. ``None`` and empty text are ignored. Any other type raises
        :class:`UnsupportedMessageError` and leaves the field untouched.
        """

        self._ensure_storage()
        if message is None:
            return
        if isinstance(message, str):
            self.set_text(field, message)
        elif isinstance(message, BaseException):
            self.set_error(field, message)
        else:
            logger.debug("Rejected %s message for field '%s'", type(message).__name__, field)
            raise UnsupportedMessageError(field, message)

    def set_text(self, field: str, text: str) -> None:
        errors = self._ensure_storage()
        if not text:
            return
        errors[field] = FieldMessage(text)

    def set_error(self, field: str, error: Optional[BaseException]) -> None:
        errors = self._ensure_storage()
        if error is None:
            return
        errors[field] = error

    def delete(self, field: str) -> None:
        if self._errors is not None:
            self._errors.pop(field, None)

    def clear(self) -> None:
        self._errors = {}

    def merge(
        self,
        other: Union["FieldErrorMap", Mapping[str, Message]],
        *,
        prefix: Optional[str] = None,
    ) -> "FieldErrorMap":
        """
        Copy every entry of ``other`` into this map and return ``self``.

        With ``prefix`` each merged field is stored as ``"<prefix>.<field>"``.
        """

        self._ensure_storage()
        for field, message in other.items():
            name = f"{prefix}.{field}" if prefix else field
            self.set(name, message)
        return self

    @contextmanager
    def capture(self, field: str) -> Iterator["FieldErrorMap"]:
        """
        Record an exception raised inside the block under ``field``.

        A :class:`FieldErrorMap` raised in the block is merged using ``field``
        as prefix rather than stored as a nested map.
        """

        self._ensure_storage()
        try:
            yield self
        except FieldErrorMap as exc:
            self.merge(exc, prefix=field)
        except Exception as exc:
            self.set_error(field, exc)

    def assign(self, other: "FieldErrorMap") -> None:
        """
        Replace this map's contents with a shallow copy of ``other``'s.
        """

        self._errors = None if other._errors is None else dict(other._errors)

    def copy(self) -> "FieldErrorMap":
        clone = type(self)()
        clone.assign(self)
        return clone

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    def has(self, field: str) -> bool:
        return self._errors is not None and field in self._errors

    def get(self, field: str) -> str:
        if self._errors is None:
            return ""
        error = self._errors.get(field)
        if error is None:
            return ""
        return str(error)

    def fields(self) -> List[str]:
        if not self._errors:
            return []
        return sorted(self._errors)

    def is_empty(self) -> bool:
        return len(self) == 0

    def as_error(self) -> Optional["FieldErrorMap"]:
        if self.is_empty():
            return None
        return self

    def items(self) -> List[Tuple[str, BaseException]]:
        if self._errors is None:
            return []
        return list(self._errors.items())

    def to_dict(self) -> Dict[str, str]:
        return {field: str(error) for field, error in self.items()}

    @property
    def initialized(self) -> bool:
        return self._errors is not None

    # ------------------------------------------------------------------ #
    # Serialization
    # ------------------------------------------------------------------ #
    def error(self) -> str:
        """
        Render the joined text form ``"field: message; field: message"``.

        Entry order follows the underlying storage and is not part of the
        format. A nested :class:`FieldErrorMap` renders as
        ``"[N nested errors]"`` instead of being expanded.
        """

        if self._errors is None:
            return NIL_TEXT
        return join_entries((field, self._display(error)) for field, error in self._errors.items())

    def to_json(self, **dumps_kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **dumps_kwargs)

    @staticmethod
    def _display(error: BaseException) -> str:
        if isinstance(error, FieldErrorMap):
            return nested_placeholder(len(error))
        return str(error)

    # ------------------------------------------------------------------ #
    # Protocol support
    # ------------------------------------------------------------------ #
    def __str__(self) -> str:
        return self.error()

    def __repr__(self) -> str:
        if self._errors is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.to_dict()!r})"

    def __len__(self) -> int:
        return len(self._errors) if self._errors is not None else 0

    def __bool__(self) -> bool:
        # Exceptions stay truthy so traceback chaining still renders empty maps.
        return True

    def __contains__(self, field: object) -> bool:
        return isinstance(field, str) and self.has(field)

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldErrorMap):
            return NotImplemented
        return (self._errors or {}) == (other._errors or {})

    def _ensure_storage(self) -> Dict[str, BaseException]:
        if self._errors is None:
            self._errors = {}
        return self._errors
