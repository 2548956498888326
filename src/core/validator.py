"""Request body validation (core domain)."""

from __future__ import annotations

import json
from typing import Optional

from core.errors import ValidationError
from core.models import Submission

REQUIRED_FIELDS = ("name", "email", "message")

_SHAPE_HINT = "request body must be a JSON object with string fields name, email and message"


def validate(raw: Optional[str]) -> Submission:
    """Parse the raw body into a Submission.

    Only presence and non-emptiness are checked; values are returned exactly
    as submitted. Email format is not validated.
    """

    if raw is None or not raw.strip():
        raise ValidationError(_SHAPE_HINT)

    try:
        payload = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        # Deeply nested arrays exhaust the parser's recursion limit.
        raise ValidationError(_SHAPE_HINT) from exc

    if not isinstance(payload, dict):
        raise ValidationError(_SHAPE_HINT)

    for key in REQUIRED_FIELDS:
        value = payload.get(key)
        if value is None:
            raise ValidationError(f"field '{key}' is required")
        if not isinstance(value, str):
            raise ValidationError(f"field '{key}' must be a string")
        if not value.strip():
            raise ValidationError(f"field '{key}' must not be empty")
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            # Lone surrogates from \ud800-style escapes cannot be stored.
            raise ValidationError(f"field '{key}' is not valid UTF-8 text") from exc

    return Submission(
        name=payload["name"],
        email=payload["email"],
        message=payload["message"],
    )
