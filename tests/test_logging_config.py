from __future__ import annotations

import logging

from logging_config import _MaskingFormatter, _masked_env_values


def _record(message: str, *args) -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, message, args, None)


def test_masking_formatter_hides_values() -> None:
    formatter = _MaskingFormatter(["ops@example.com"], fmt="%(message)s")
    assert formatter.format(_record("sending to %s", "ops@example.com")) == "sending to ***"


def test_masking_formatter_prefers_longest_value() -> None:
    formatter = _MaskingFormatter(["ops", "ops@example.com"], fmt="%(message)s")
    assert formatter.format(_record("to ops@example.com")) == "to ***"


def test_masking_formatter_without_values_is_passthrough() -> None:
    formatter = _MaskingFormatter(["", ""], fmt="%(message)s")
    assert formatter.format(_record("a.b*c")) == "a.b*c"


def test_masked_env_values_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("SENDER_EMAIL", "ops@example.com")
    monkeypatch.setenv("EMPTY_ONE", "")
    monkeypatch.delenv("UNSET_ONE", raising=False)
    assert _masked_env_values(["SENDER_EMAIL", "EMPTY_ONE", "UNSET_ONE"]) == ["ops@example.com"]
