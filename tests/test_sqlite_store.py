from __future__ import annotations

import sqlite3

import pytest

from adapters.sqlite_store import SQLiteRecordStore
from core.models import Record


def _record(message_id: str = "1700000000000-abc") -> Record:
    return Record(
        message_id=message_id,
        name="Ana",
        email="ana@x.com",
        message="Hi",
        created_at="2024-01-01T12:30:00+00:00",
    )


def test_put_and_get(tmp_path) -> None:
    store = SQLiteRecordStore(str(tmp_path / "contact.db"))
    store.init_db()

    store.put(_record())

    assert store.get("1700000000000-abc") == _record()
    assert store.get("missing") is None
    assert store.count() == 1


def test_init_db_is_idempotent(tmp_path) -> None:
    store = SQLiteRecordStore(str(tmp_path / "contact.db"))
    store.init_db()
    store.init_db()
    assert store.count() == 0


def test_put_does_not_overwrite_existing_id(tmp_path) -> None:
    store = SQLiteRecordStore(str(tmp_path / "contact.db"))
    store.init_db()
    store.put(_record())

    with pytest.raises(sqlite3.IntegrityError):
        store.put(_record())
    assert store.count() == 1
