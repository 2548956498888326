"""Command line entry point for the contact form service."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional

import settings
from adapters.sqlite_store import SQLiteRecordStore
from bootstrap import build_pipeline
from core.models import HttpRequest
from logging_config import configure_logging


def _read_body(path: Optional[str]) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as handle:
        return handle.read()


def _submit(path: Optional[str]) -> int:
    """Run one body through the configured pipeline and print the response."""

    configure_logging()
    pipeline = build_pipeline()
    request = HttpRequest(method="POST", body=_read_body(path))
    response = asyncio.run(pipeline.handle(request))
    print(f"{response.status_code} {response.body}")
    return 0 if 200 <= response.status_code < 300 else 1


def _init_db() -> int:
    configure_logging()
    logger = logging.getLogger(__name__)
    if settings.STORE_BACKEND != "sqlite":
        logger.error("init-db only applies to STORE_BACKEND=sqlite")
        return 1
    if not settings.TABLE_NAME:
        logger.error("TABLE_NAME must point at the SQLite database file")
        return 1
    SQLiteRecordStore(settings.TABLE_NAME).init_db()
    logger.info("Initialized %s", settings.TABLE_NAME)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="contactform")
    subparsers = parser.add_subparsers(dest="command")

    submit = subparsers.add_parser("submit", help="Run a JSON body through the pipeline")
    submit.add_argument("file", nargs="?", help="JSON file to submit (default: stdin)")
    subparsers.add_parser("init-db", help="Create the SQLite submissions table")

    args = parser.parse_args(argv)
    if args.command == "submit":
        return _submit(args.file)
    if args.command == "init-db":
        return _init_db()
    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
