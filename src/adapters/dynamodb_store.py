"""DynamoDB storage adapter.

Implements the core RecordStore port with a single unconditional put_item.
"""

from __future__ import annotations

import logging

from core.models import Record

LOGGER = logging.getLogger(__name__)


class DynamoDBRecordStore:
    """Thin DynamoDB wrapper that satisfies the RecordStore contract."""

    def __init__(self, resource, table_name: str) -> None:
        # The service resource is built once per process and shared read-only.
        self._resource = resource
        self._table_name = table_name

    def put(self, record: Record) -> None:
        """Insert the record. No existence check and no update semantics."""

        table = self._resource.Table(self._table_name)
        table.put_item(Item=record.to_item())
        LOGGER.debug("put_item into %s for %s", self._table_name, record.message_id)
