"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any integration-specific types.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Submission:
    """Validated contact form input."""

    name: str
    email: str
    message: str


@dataclass(frozen=True)
class Record:
    """Persisted representation of a single submission."""

    message_id: str
    name: str
    email: str
    message: str
    created_at: str

    def to_item(self) -> dict[str, str]:
        """Return the stored attribute map (camelCase keys)."""

        return {
            "messageId": self.message_id,
            "name": self.name,
            "email": self.email,
            "message": self.message,
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class NotificationRequest:
    """Operator alert derived from a submission. Never persisted."""

    source: str
    destination: str
    subject_text: str
    body_text: str
    body_html: str


@dataclass(frozen=True)
class HttpRequest:
    """Transport-neutral view of an inbound HTTP request."""

    method: str
    body: Optional[str]
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpResponse:
    """Response returned to the caller."""

    status_code: int
    headers: dict[str, str]
    body: str

    def json(self) -> Any:
        return json.loads(self.body) if self.body else None

    def to_dict(self) -> dict[str, Any]:
        """Render the API Gateway proxy integration shape."""

        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }
