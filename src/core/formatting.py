"""Notification content built from a submission."""

from __future__ import annotations

from core.models import NotificationRequest, Submission

SUBJECT = "New contact message"


def _format_text(submission: Submission) -> str:
    return f"New message from {submission.name} ({submission.email}):\n\n{submission.message}"


def _format_html(submission: Submission) -> str:
    # Only newlines are converted.
    message = submission.message.replace("\n", "<br>")
    return (
        f"<p>New message from <strong>{submission.name}</strong> ({submission.email}):</p>"
        f"<p>{message}</p>"
    )


def build_notification(submission: Submission, sender_address: str) -> NotificationRequest:
    """Return a self-addressed operator alert for the submission."""

    return NotificationRequest(
        source=sender_address,
        destination=sender_address,
        subject_text=SUBJECT,
        body_text=_format_text(submission),
        body_html=_format_html(submission),
    )
