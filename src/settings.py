"""Process-wide configuration for the contact form service.

Settings come from environment variables (the Lambda configuration, or a
local .env file loaded through python-dotenv). They are read once at import
and never change for the lifetime of the process.
"""

import os

from dotenv import load_dotenv

from core.config import Configuration

load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# storeTarget: DynamoDB table name, or the SQLite file path for local runs.
TABLE_NAME = os.getenv("TABLE_NAME", "")

# senderAddress: the operator address, used as both sender and recipient.
SENDER_EMAIL = os.getenv("SENDER_EMAIL", "")

# Backend switches select adapters without changing core logic.
# - STORE_BACKEND: "dynamodb" or "sqlite"
# - NOTIFICATION_METHOD: "ses" or "log"
STORE_BACKEND = os.getenv("STORE_BACKEND", "dynamodb").strip().lower()
NOTIFICATION_METHOD = os.getenv("NOTIFICATION_METHOD", "ses").strip().lower()

# Region for boto3 clients; None falls back to the default provider chain.
AWS_REGION = os.getenv("AWS_REGION") or None

# Logging configuration.
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None
LOG_FILE_MAX_BYTES = int(os.getenv("LOG_FILE_MAX_BYTES", str(5 * 1024 * 1024)))
LOG_FILE_BACKUP_COUNT = int(os.getenv("LOG_FILE_BACKUP_COUNT", "5"))
# Names of environment variables whose values are masked in log output.
LOG_REDACT = [name.strip() for name in os.getenv("LOG_REDACT", "").split(",") if name.strip()]


def configuration() -> Configuration:
    """Return the configuration the core pipeline checks on every request."""

    return Configuration(store_target=TABLE_NAME, sender_address=SENDER_EMAIL)
