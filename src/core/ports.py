"""Collaborator contracts for the submission pipeline.

The pipeline writes each record through a RecordStore and alerts the operator
through a Notifier. DynamoDB/SQLite and SES/log adapters implement them.
"""

from __future__ import annotations

from typing import Protocol

from core.models import NotificationRequest, Record


class RecordStore(Protocol):
    """Durable persistence required by the core pipeline."""

    def put(self, record: Record) -> None:
        ...


class Notifier(Protocol):
    """Outbound email delivery required by the core pipeline."""

    async def send(self, notification: NotificationRequest) -> None:
        ...
