"""
Field validators for the signup example.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional

from fielderrors import FieldErrorMap

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[a-z]{2,}$", re.IGNORECASE)
MIN_PASSWORD_LENGTH = 8


def validate_address(address: Mapping[str, Any]) -> None:
    errors = FieldErrorMap()
    if not address.get("street"):
        errors.set("street", "street is required")
    postcode = str(address.get("postcode", ""))
    if not postcode.isdigit():
        errors.set("postcode", "postcode must be numeric")
    err = errors.as_error()
    if err is not None:
        raise err


def validate_signup(payload: Mapping[str, Any]) -> Optional[FieldErrorMap]:
    errors = FieldErrorMap()

    email = payload.get("email") or ""
    if not email:
        errors.set("email", "email is required")
    elif not EMAIL_RE.match(email):
        errors.set("email", "invalid email format")

    password = payload.get("password") or ""
    if len(password) < MIN_PASSWORD_LENGTH:
        errors.set("password", f"must be at least {MIN_PASSWORD_LENGTH} characters")

    with errors.capture("age"):
        age = int(payload.get("age", 0))
        if age < 18:
            raise ValueError("must be 18 or older")

    with errors.capture("address"):
        validate_address(payload.get("address") or {})

    return errors.as_error()
