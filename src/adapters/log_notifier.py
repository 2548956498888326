"""Logging-only notification adapter for local runs."""

from __future__ import annotations

import logging

from core.models import NotificationRequest

LOGGER = logging.getLogger(__name__)


class LogNotifier:
    """Notifier adapter that writes the alert to the log instead of mailing it."""

    async def send(self, notification: NotificationRequest) -> None:
        LOGGER.info(
            "Notification to %s: %s\n%s",
            notification.destination,
            notification.subject_text,
            notification.body_text,
        )
