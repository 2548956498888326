"""Error taxonomy for the submission pipeline."""

from __future__ import annotations

from enum import Enum


class Outcome(str, Enum):
    """Every caller-visible result of a pipeline run."""

    SUCCESS = "success"
    MALFORMED = "malformed"
    CONFIGURATION = "configuration"
    PERSISTENCE = "persistence"
    NOTIFICATION = "notification"
    METHOD_NOT_ALLOWED = "method_not_allowed"


class ContactFormError(Exception):
    """Base class for failures that end a pipeline run."""

    outcome: Outcome


class ConfigurationError(ContactFormError):
    """Required deployment settings are missing."""

    outcome = Outcome.CONFIGURATION

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Missing configuration: {', '.join(missing)}")
        self.missing = list(missing)


class ValidationError(ContactFormError):
    """The request body does not describe a submission."""

    outcome = Outcome.MALFORMED

    def __init__(self, description: str, kind: str = "malformed") -> None:
        super().__init__(description)
        self.description = description
        self.kind = kind


class PersistenceError(ContactFormError):
    """The record store rejected the write."""

    outcome = Outcome.PERSISTENCE


class NotificationError(ContactFormError):
    """The notifier rejected the dispatch. The record is already stored."""

    outcome = Outcome.NOTIFICATION
