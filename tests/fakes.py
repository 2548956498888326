from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from core.config import Configuration
from core.models import NotificationRequest, Record
from core.pipeline import SubmissionPipeline


class FakeStore:
    def __init__(self, calls: Optional[list[str]] = None, fail: bool = False) -> None:
        self.records: list[Record] = []
        self.calls = calls if calls is not None else []
        self.fail = fail

    def put(self, record: Record) -> None:
        self.calls.append("put")
        if self.fail:
            raise RuntimeError("ProvisionedThroughputExceededException: table busy")
        self.records.append(record)


class FakeNotifier:
    def __init__(self, calls: Optional[list[str]] = None, fail: bool = False) -> None:
        self.sent: list[NotificationRequest] = []
        self.calls = calls if calls is not None else []
        self.fail = fail

    async def send(self, notification: NotificationRequest) -> None:
        self.calls.append("send")
        if self.fail:
            raise RuntimeError("MessageRejected: Email address is not verified")
        self.sent.append(notification)


FIXED_NOW = datetime(2024, 1, 1, 12, 30, tzinfo=timezone.utc)


def make_pipeline(
    store: FakeStore,
    notifier: FakeNotifier,
    *,
    table: str = "messages",
    sender: str = "ops@example.com",
    fixed_ids: bool = False,
) -> SubmissionPipeline:
    counter = iter(range(1, 1000))
    return SubmissionPipeline(
        config=Configuration(store_target=table, sender_address=sender),
        store=store,
        notifier=notifier,
        clock=lambda: FIXED_NOW,
        id_factory=(lambda: f"id-{next(counter)}") if fixed_ids else None,
    )
