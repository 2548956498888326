"""API Gateway-to-core request mapping adapter.

This keeps the Lambda proxy event format out of the core pipeline. Both the
REST API (payload v1) and HTTP API (payload v2) shapes are accepted.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Optional

from core.models import HttpRequest


def _method_from_event(event: dict[str, Any]) -> str:
    method = event.get("httpMethod")
    if not method:
        http = (event.get("requestContext") or {}).get("http") or {}
        method = http.get("method")
    # Direct test invocations carry no method at all.
    return str(method or "POST").upper()


def _body_from_event(event: dict[str, Any]) -> Optional[str]:
    body = event.get("body")
    if body is None:
        return None
    if not isinstance(body, str):
        return None
    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            # Undecodable bodies are left for the validator to reject.
            return ""
    return body


def build_request(event: dict[str, Any]) -> HttpRequest:
    """Build a core HttpRequest from an API Gateway proxy event."""

    headers = event.get("headers") or {}
    return HttpRequest(
        method=_method_from_event(event),
        body=_body_from_event(event),
        headers={str(key).lower(): str(value) for key, value in headers.items()},
    )
