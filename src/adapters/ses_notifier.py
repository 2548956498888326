"""Amazon SES notification adapter.

Sends the operator alert through the SES SendEmail API.
"""

from __future__ import annotations

from core.models import NotificationRequest

CHARSET = "UTF-8"


class SesNotifier:
    """Notifier adapter that delivers email via Amazon SES."""

    def __init__(self, client) -> None:
        self._client = client

    async def send(self, notification: NotificationRequest) -> None:
        """Send the notification. Delivery status is not tracked."""

        # boto3 is blocking; the pipeline awaits this call before responding
        # anyway, and the adapter boundary allows an async client later.
        self._client.send_email(
            Source=notification.source,
            Destination={"ToAddresses": [notification.destination]},
            Message={
                "Subject": {"Data": notification.subject_text, "Charset": CHARSET},
                "Body": {
                    "Text": {"Data": notification.body_text, "Charset": CHARSET},
                    "Html": {"Data": notification.body_html, "Charset": CHARSET},
                },
            },
        )
