"""Helpers for Vercel-style serverless request/response dicts."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable

logger = logging.getLogger(__name__)


def request_method(request: Any) -> str:
    if isinstance(request, dict):
        method = request.get("method") or request.get("httpMethod") or ""
    else:
        method = getattr(request, "method", "") or ""
    return str(method).upper()


def request_json(request: Any) -> dict[str, Any]:
    """Return the JSON body as a dict; anything unparseable becomes {}."""
    if isinstance(request, dict):
        body = request.get("body")
    elif hasattr(request, "json"):
        try:
            body = request.json() if callable(request.json) else request.json
        except Exception as e:
            # frameworks raise their own errors here (werkzeug BadRequest, etc.)
            logger.warning("Could not parse request body: %s", e)
            return {}
    else:
        body = getattr(request, "body", None)

    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        if not body.strip():
            return {}
        try:
            body = json.loads(body)
        except ValueError as e:
            logger.warning("Could not parse request body: %s", e)
            return {}

    return body if isinstance(body, dict) else {}


def cors_headers(methods: Iterable[str], origin: str = "*") -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": ", ".join(methods),
        "Access-Control-Allow-Headers": "Content-Type",
    }


def json_response(status_code: int, body: dict[str, Any], headers: dict[str, str] | None = None) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"content-type": "application/json", **(headers or {})},
        "body": json.dumps(body),
    }


def preflight_response(methods: Iterable[str], origin: str = "*") -> dict[str, Any]:
    """CORS preflight: 200 with an empty body."""
    return {"statusCode": 200, "headers": cors_headers(methods, origin), "body": ""}
