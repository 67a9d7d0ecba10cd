"""
Signup example: errors cross a service boundary and are recovered by the handler.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from fielderrors import find_field_errors
from fielderrors.serialization.json_encoder import dumps

from .forms import validate_signup


class SignupFailed(Exception):
    """Service-level error that hides the validation details."""


def register_user(payload: Mapping[str, Any]) -> Dict[str, Any]:
    errors = validate_signup(payload)
    if errors is not None:
        raise SignupFailed("signup rejected") from errors
    return {"email": payload["email"]}


def handle_signup(payload: Mapping[str, Any]) -> Dict[str, Any]:
    try:
        user = register_user(payload)
    except SignupFailed as exc:
        errors = find_field_errors(exc)
        if errors is None:
            raise
        return {"status": 422, "body": {"detail": str(exc), "errors": errors}}
    return {"status": 201, "body": user}


def run_demo(payload: Mapping[str, Any]) -> str:
    response = handle_signup(payload)
    return dumps(response, sort_keys=True)


if __name__ == "__main__":
    print(run_demo({"email": "not-an-email", "password": "short", "age": "17", "address": {}}))
    print(run_demo({"email": "ada@example.com", "password": "correct horse", "age": 36,
                    "address": {"street": "1 Main St", "postcode": "12345"}}))
