"""Core submission pipeline.

This module is integration-agnostic. It only relies on ports for storage and
notifications. The pipeline enforces a strict order:
1) Configuration check (before the body is read)
2) Validate the body
3) Build the record
4) Persist (a failure aborts before any email)
5) Build the notification
6) Notify (a failure leaves the record in place)
7) Respond
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional

from core.config import Configuration
from core.errors import (
    ConfigurationError,
    ContactFormError,
    NotificationError,
    Outcome,
    PersistenceError,
    ValidationError,
)
from core.formatting import build_notification
from core.models import HttpRequest, HttpResponse, Record, Submission
from core.ports import Notifier, RecordStore
from core.responses import build_preflight_response, build_response
from core.validator import validate

LOGGER = logging.getLogger(__name__)


def generate_message_id() -> str:
    """Return a time-ordered id that stays unique within one millisecond."""

    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:12]}"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SubmissionPipeline:
    """Orchestrates validation, persistence, notification, and the response."""

    def __init__(
        self,
        config: Configuration,
        store: RecordStore,
        notifier: Notifier,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self._config = config
        self._store = store
        self._notifier = notifier
        self._clock = clock or _utc_now
        self._id_factory = id_factory or generate_message_id

    async def handle(self, request: HttpRequest) -> HttpResponse:
        """Process one request through the pipeline and build the response."""

        method = (request.method or "POST").upper()
        if method == "OPTIONS":
            return build_preflight_response()
        if method != "POST":
            return build_response(Outcome.METHOD_NOT_ALLOWED)

        try:
            message_id = await self._run(request)
        except ValidationError as exc:
            LOGGER.info("Rejected submission: %s", exc.description)
            return build_response(exc.outcome, exc.description)
        except ContactFormError as exc:
            return build_response(exc.outcome)

        LOGGER.info("Submission %s handled", message_id)
        return build_response(Outcome.SUCCESS)

    async def _run(self, request: HttpRequest) -> str:
        missing = self._config.missing()
        if missing:
            error = ConfigurationError(missing)
            LOGGER.error("%s", error)
            raise error

        submission = validate(request.body)
        try:
            record = self._build_record(submission)
        except Exception as exc:
            LOGGER.exception("Could not build record")
            raise PersistenceError("could not store submission") from exc

        try:
            self._store.put(record)
        except Exception as exc:
            LOGGER.exception("Record store failed for %s", record.message_id)
            raise PersistenceError("could not store submission") from exc
        LOGGER.info("Record %s stored", record.message_id)

        notification = build_notification(submission, self._config.sender_address)
        try:
            await self._notifier.send(notification)
        except Exception as exc:
            # The record stays persisted; durability is not rolled back.
            LOGGER.exception("Notifier failed for %s", record.message_id)
            raise NotificationError("could not send notification") from exc
        LOGGER.info("Notification sent for %s", record.message_id)

        return record.message_id

    def _build_record(self, submission: Submission) -> Record:
        return Record(
            message_id=self._id_factory(),
            name=submission.name,
            email=submission.email,
            message=submission.message,
            created_at=self._clock().isoformat(),
        )
