from __future__ import annotations

import json

import pytest

from core.errors import Outcome, ValidationError
from core.validator import validate


def test_valid_body_returns_submission() -> None:
    submission = validate(json.dumps({"name": "Ana", "email": "ana@x.com", "message": "Hi"}))
    assert submission.name == "Ana"
    assert submission.email == "ana@x.com"
    assert submission.message == "Hi"


def test_values_are_kept_as_submitted() -> None:
    submission = validate(json.dumps({"name": " Ana ", "email": "ana@x.com", "message": "Hi\nthere"}))
    assert submission.name == " Ana "
    assert submission.message == "Hi\nthere"


def test_extra_fields_are_ignored() -> None:
    submission = validate(
        json.dumps({"name": "Ana", "email": "ana@x.com", "message": "Hi", "phone": "123"})
    )
    assert submission.name == "Ana"


def test_email_format_is_not_checked() -> None:
    submission = validate(json.dumps({"name": "Ana", "email": "not-an-email", "message": "Hi"}))
    assert submission.email == "not-an-email"


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "   ",
        "not json",
        '"not json"',
        "[]",
        "42",
        "null",
    ],
)
def test_non_object_bodies_are_malformed(raw) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(raw)
    assert excinfo.value.kind == "malformed"
    assert excinfo.value.outcome is Outcome.MALFORMED


def test_missing_field_is_named() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(json.dumps({"name": "Ana", "message": "Hi"}))
    assert "email" in excinfo.value.description


def test_non_string_field_is_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(json.dumps({"name": "Ana", "email": "ana@x.com", "message": 7}))
    assert "message" in excinfo.value.description


def test_blank_field_is_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(json.dumps({"name": "  ", "email": "ana@x.com", "message": "Hi"}))
    assert "name" in excinfo.value.description


def test_deeply_nested_body_is_malformed() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate("[" * 100000 + "]" * 100000)
    assert excinfo.value.outcome is Outcome.MALFORMED


def test_lone_surrogate_field_is_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate('{"name": "\\ud800", "email": "ana@x.com", "message": "Hi"}')
    assert "name" in excinfo.value.description
