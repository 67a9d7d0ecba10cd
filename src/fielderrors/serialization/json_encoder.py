"""
JSON projection of field error maps.
"""

from __future__ import annotations

import json
from typing import Any

from ..core.map import FieldErrorMap


class FieldErrorsJSONEncoder(json.JSONEncoder):
    """
    Encoder rendering any embedded :class:`FieldErrorMap` as ``{field: message}``.
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, FieldErrorMap):
            return o.to_dict()
        return super().default(o)


def dumps(value: Any, **kwargs: Any) -> str:
    kwargs.setdefault("cls", FieldErrorsJSONEncoder)
    return json.dumps(value, **kwargs)
