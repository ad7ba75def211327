# lambda_function.py
"""
AWS Lambda HTTP handler (for API Gateway "HTTP API" or "REST API").

Responsibilities here (not in core_schematic):
1) Obtain the exact raw body as Discord sent it (decode if base64).
2) Load configuration once per cold start.
3) Hand the raw bytes + headers to core_schematic.handle_interaction.
4) Return the {statusCode, headers, body} structure expected by API Gateway.

Environment variables: see config.py.
"""

import base64
import logging
from functools import lru_cache

from config import Config
from core_schematic import handle_interaction
from log_utils import configure_logging

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Built on first use and reused for the lifetime of the container."""
    config = Config.from_env()
    configure_logging(config.log_level)
    return config


def _raw_body(event: dict) -> bytes:
    """
    The signature covers the exact bytes Discord sent, so never re-encode parsed JSON.
    API Gateway may hand the body over base64-encoded.
    """
    body = event.get("body") or ""
    if event.get("isBase64Encoded"):
        return base64.b64decode(body)
    return body.encode("utf-8")


def _response(status: int, headers: dict | None = None, body: str = "") -> dict:
    """
    Format the Lambda proxy integration response.
    - 'body' must be a string (JSON-encoded if returning JSON).
    """
    return {"statusCode": status, "headers": headers or {}, "body": body}


def handler(event, context):
    """
    Main Lambda entrypoint. 'event' is the HTTP request from API Gateway.
    Key fields we use:
      event["body"]             : raw request body (string or base64)
      event["isBase64Encoded"]  : whether 'body' needs base64 decoding
      event["headers"]          : dict of HTTP headers
    """
    config = get_config()
    logger.info("interaction")

    headers = event.get("headers") or {}
    status, hdrs, body = handle_interaction(_raw_body(event), headers, config)
    return _response(status, hdrs, body)
