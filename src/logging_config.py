"""Logging setup shared by the Lambda and command line entry points."""

from __future__ import annotations

import logging
import os
import re
from logging.handlers import RotatingFileHandler
from typing import Optional

import settings

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


class _MaskingFormatter(logging.Formatter):
    """Hide configured values (operator address, keys) in formatted lines."""

    MASK = "***"

    def __init__(self, masked_values: list[str], fmt: str, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        # Longest first, so a value containing another is masked whole.
        values = sorted({value for value in masked_values if value}, key=len, reverse=True)
        self._pattern = re.compile("|".join(re.escape(value) for value in values)) if values else None

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        if self._pattern is None:
            return line
        return self._pattern.sub(self.MASK, line)


def _masked_env_values(env_names: list[str]) -> list[str]:
    return [os.environ[name] for name in env_names if os.environ.get(name)]


def configure_logging() -> None:
    """Install console/file handlers, or adopt the runtime's existing ones."""

    level = getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO)
    formatter = _MaskingFormatter(
        _masked_env_values(settings.LOG_REDACT),
        fmt=FORMAT,
        datefmt=DATEFMT,
    )

    root = logging.getLogger()
    if root.handlers:
        # The Lambda runtime installs its own handler before our code runs.
        root.setLevel(level)
        for handler in root.handlers:
            handler.setFormatter(formatter)
        return

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if settings.LOG_FILE:
        path = settings.LOG_FILE
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=settings.LOG_FILE_MAX_BYTES,
            backupCount=settings.LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers)
