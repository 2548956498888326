"""AWS Lambda entry point for the contact form endpoint.

API Gateway invokes ``lambda_handler`` once per request. The pipeline and its
AWS clients are built on the first invocation and reused by later ones in the
same execution environment.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from adapters.apigateway_mapper import build_request
from bootstrap import build_pipeline
from core.pipeline import SubmissionPipeline
from logging_config import configure_logging

LOGGER = logging.getLogger(__name__)

_PIPELINE: Optional[SubmissionPipeline] = None


def _get_pipeline() -> SubmissionPipeline:
    global _PIPELINE
    if _PIPELINE is None:
        configure_logging()
        _PIPELINE = build_pipeline()
    return _PIPELINE


def lambda_handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Handle one API Gateway proxy event and return the proxy response."""

    pipeline = _get_pipeline()
    request = build_request(event or {})
    response = asyncio.run(pipeline.handle(request))
    LOGGER.info("%s request answered with %s", request.method, response.status_code)
    return response.to_dict()
