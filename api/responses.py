"""Shared request/response helpers for endpoint handlers."""

import json
from typing import Any


def json_response(status_code: int, payload: Any) -> dict:
    """Build a serverless-style JSON response."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json; charset=utf-8"},
        "body": json.dumps(payload)
    }


def parse_body(request: dict) -> dict:
    """
    Return the request body as a dict.

    Accepts an already-parsed dict or JSON text; anything else is treated
    as an empty body.
    """
    body = request.get("body")
    if isinstance(body, dict):
        return body
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8", errors="replace")
    if not body:
        return {}
    try:
        parsed = json.loads(body)
    except json.JSONDecodeError:
        return {}
    return parsed if isinstance(parsed, dict) else {}
