"""Mapping from pipeline outcomes to HTTP responses.

The caller is a browser app served from another origin, so every response
carries a permissive CORS header.
"""

from __future__ import annotations

import json
from typing import Optional

from core.errors import Outcome
from core.models import HttpResponse

SUCCESS_MESSAGE = "Message saved and email sent!"

BASE_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Content-Type": "application/json",
}

ALLOWED_METHODS = "POST, OPTIONS"

_STATUS = {
    Outcome.SUCCESS: 200,
    Outcome.MALFORMED: 400,
    Outcome.METHOD_NOT_ALLOWED: 405,
    Outcome.CONFIGURATION: 500,
    Outcome.PERSISTENCE: 502,
    Outcome.NOTIFICATION: 502,
}

# Fixed texts keep infrastructure details out of the response body.
_ERROR_TEXT = {
    Outcome.METHOD_NOT_ALLOWED: "method not allowed",
    Outcome.CONFIGURATION: "service is not configured",
    Outcome.PERSISTENCE: "could not store submission",
    Outcome.NOTIFICATION: "could not send notification",
}


def build_response(outcome: Outcome, description: Optional[str] = None) -> HttpResponse:
    """Return the response for an outcome.

    ``description`` is only used for validation failures, where the text
    describes the caller's own input.
    """

    headers = dict(BASE_HEADERS)
    if outcome is Outcome.SUCCESS:
        payload = {"message": SUCCESS_MESSAGE}
    elif outcome is Outcome.MALFORMED:
        payload = {"error": description or "invalid submission"}
    else:
        payload = {"error": _ERROR_TEXT[outcome]}

    if outcome is Outcome.METHOD_NOT_ALLOWED:
        headers["Allow"] = ALLOWED_METHODS

    return HttpResponse(
        status_code=_STATUS[outcome],
        headers=headers,
        body=json.dumps(payload),
    )


def build_preflight_response() -> HttpResponse:
    """Return the CORS preflight answer for OPTIONS requests."""

    headers = dict(BASE_HEADERS)
    headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
    headers["Access-Control-Allow-Headers"] = "Content-Type"
    return HttpResponse(status_code=204, headers=headers, body="")
