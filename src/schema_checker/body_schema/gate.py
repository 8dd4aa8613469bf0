"""Gate API Gateway request bodies on a schema before a handler runs."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping

from .checker import validate
from .config import CheckerConfig

logger = logging.getLogger(__name__)

NOT_AN_OBJECT_MESSAGE = "request body must be a JSON object"
INVALID_JSON_MESSAGE = "request body must be valid JSON"
SCHEMA_MISMATCH_MESSAGE = "request body does not match schema"


class RequestBodyValidationError(ValueError):
    """Raised when a request body fails its schema."""


def json_response(status_code: int, payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Build a proxy-integration response carrying ``payload`` as JSON."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(payload),
    }


def rejection_response(message: str) -> Dict[str, Any]:
    """400 response for a body the gate refused, with the reason under ``error``."""
    return json_response(400, {"error": message})


def parse_json_body(event: Mapping[str, Any]) -> tuple[dict[str, Any] | None, str | None]:
    """
    Extract the JSON object body of a proxy event.

    Test events and local invokes may carry an already-decoded mapping, which
    is copied into a plain dict. Returns ``(body, None)`` or ``(None, reason)``.
    """
    raw = event.get("body")

    if isinstance(raw, Mapping):
        return dict(raw), None

    if not isinstance(raw, str):
        return None, NOT_AN_OBJECT_MESSAGE

    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError:
        return None, INVALID_JSON_MESSAGE

    if not isinstance(decoded, dict):
        return None, NOT_AN_OBJECT_MESSAGE

    return decoded, None


def gate_request_body(
    event: Mapping[str, Any],
    schema: Mapping[str, Any],
    *,
    config: CheckerConfig | None = None,
) -> tuple[dict[str, Any] | None, Dict[str, Any] | None]:
    """
    Parse and check the body of a proxy event.

    Returns ``(body, None)`` when the body is accepted, otherwise
    ``(None, response)`` with a ready-to-return 400 response.
    """
    body, parse_error = parse_json_body(event)
    if parse_error is not None:
        logger.info("Rejected request body: %s", parse_error)
        return None, rejection_response(parse_error)

    if not validate(body, schema, config=config):
        logger.info("Rejected request body: %s", SCHEMA_MISMATCH_MESSAGE)
        return None, rejection_response(SCHEMA_MISMATCH_MESSAGE)

    return body, None


def require_valid_body(
    body: Any,
    schema: Mapping[str, Any],
    *,
    config: CheckerConfig | None = None,
    label: str = "request body",
) -> Mapping[str, Any]:
    """Return the body unchanged, or raise if it does not match the schema."""
    if not validate(body, schema, config=config):
        raise RequestBodyValidationError(f"{label}: does not match schema")
    return body
