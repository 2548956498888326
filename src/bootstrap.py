"""Adapter selection and pipeline construction from settings."""

from __future__ import annotations

import logging

import settings
from adapters.dynamodb_store import DynamoDBRecordStore
from adapters.log_notifier import LogNotifier
from adapters.ses_notifier import SesNotifier
from adapters.sqlite_store import SQLiteRecordStore
from clients import build_dynamodb_resource, build_ses_client
from core.pipeline import SubmissionPipeline
from core.ports import Notifier, RecordStore

LOGGER = logging.getLogger(__name__)


def build_store() -> RecordStore:
    """Select the record store adapter based on STORE_BACKEND."""

    if settings.STORE_BACKEND == "dynamodb":
        return DynamoDBRecordStore(build_dynamodb_resource(settings.AWS_REGION), settings.TABLE_NAME)
    if settings.STORE_BACKEND == "sqlite":
        store = SQLiteRecordStore(settings.TABLE_NAME)
        if settings.TABLE_NAME:
            store.init_db()
        return store
    raise RuntimeError("STORE_BACKEND must be 'dynamodb' or 'sqlite'")


def build_notifier() -> Notifier:
    """Select the notifier adapter based on NOTIFICATION_METHOD."""

    if settings.NOTIFICATION_METHOD == "ses":
        return SesNotifier(build_ses_client(settings.AWS_REGION))
    if settings.NOTIFICATION_METHOD == "log":
        return LogNotifier()
    raise RuntimeError("NOTIFICATION_METHOD must be 'ses' or 'log'")


def build_pipeline() -> SubmissionPipeline:
    """Wire the configured adapters into a pipeline."""

    pipeline = SubmissionPipeline(
        config=settings.configuration(),
        store=build_store(),
        notifier=build_notifier(),
    )
    LOGGER.info(
        "Pipeline ready (store=%s, notifier=%s)",
        settings.STORE_BACKEND,
        settings.NOTIFICATION_METHOD,
    )
    return pipeline
