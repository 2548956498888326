"""AWS client factory for the contact form service.

Clients are created once per process and reused across invocations. They are
never reconfigured by a request.
"""

from __future__ import annotations

import logging
from typing import Optional

import boto3


def build_dynamodb_resource(region: Optional[str] = None):
    """Create the DynamoDB service resource used by the record store."""

    logging.getLogger(__name__).info("Initializing DynamoDB resource")
    return boto3.resource("dynamodb", region_name=region)


def build_ses_client(region: Optional[str] = None):
    """Create the SES client used by the notifier."""

    logging.getLogger(__name__).info("Initializing SES client")
    return boto3.client("ses", region_name=region)
