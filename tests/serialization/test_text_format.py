import logging

import pytest

from fielderrors import FieldErrorMap, FieldMessage, parse_errors


def test_error_text_for_uninitialized_and_empty_maps():
    assert FieldErrorMap().error() == "<nil>"
    assert FieldErrorMap({}).error() == ""


def test_error_text_single_entry():
    errors = FieldErrorMap({"field": ValueError("message")})
    assert errors.error() == "field: message"
    assert str(errors) == errors.error()


def test_error_text_multiple_entries_any_order():
    errors = FieldErrorMap({"field1": ValueError("msg1"), "field2": ValueError("msg2")})
    assert str(errors) in {"field1: msg1; field2: msg2", "field2: msg2; field1: msg1"}


def test_nested_map_collapses_to_count():
    nested = FieldErrorMap({"street": "required", "zip": "invalid"})
    errors = FieldErrorMap()
    errors.set("address", nested)
    assert str(errors) == "address: [2 nested errors]"
    assert errors.get("address") in {"street: required; zip: invalid", "zip: invalid; street: required"}


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", {}),
        ("field: message", {"field": "message"}),
        ("field1: msg1; field2: msg2", {"field1": "msg1", "field2": "msg2"}),
        ("field: message: with colons", {"field": "message: with colons"}),
        ("field1: msg1; ; field2: msg2", {"field1": "msg1", "field2": "msg2"}),
        ("field1: msg1; invalidpart; field2: msg2", {"field1": "msg1", "field2": "msg2"}),
        ("field: first; field: second", {"field": "second"}),
        (": no field; empty: ", {}),
    ],
)
def test_parse_errors(text, expected):
    assert parse_errors(text) == expected


def test_parse_errors_returns_fresh_dict():
    first = parse_errors("")
    first["x"] = "y"
    assert parse_errors("") == {}


def test_parse_errors_logs_malformed_segments(caplog):
    caplog.set_level(logging.DEBUG, logger="fielderrors.serialization.text")
    assert parse_errors("a: b; broken") == {"a": "b"}
    assert any("broken" in record.getMessage() for record in caplog.records)


def test_round_trip_through_text():
    errors = FieldErrorMap()
    errors.set("field1", "message1")
    errors.set("field2", "message2")
    errors.set("field3", ValueError("bad: value"))
    parsed = parse_errors(errors.error())
    assert parsed == {field: errors.get(field) for field in errors.fields()}


def test_round_trip_loses_nested_detail():
    errors = FieldErrorMap({"name": "required"})
    errors.set("address", FieldErrorMap({"street": "required"}))
    assert parse_errors(str(errors)) == {"name": "required", "address": "[1 nested errors]"}


def test_parse_builds_initialized_map():
    errors = FieldErrorMap.parse("email: invalid format; password: too short")
    assert errors.fields() == ["email", "password"]
    assert errors.get("email") == "invalid format"
    assert dict(errors.items())["password"] == FieldMessage("too short")

    empty = FieldErrorMap.parse("")
    assert empty.initialized
    assert empty.is_empty()
    assert str(empty) == ""
