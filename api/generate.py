"""Vercel serverless function: POST /generate.

Acts as a proxy to the Google Gemini API. The API key lives in the server
environment and is never exposed to clients.
"""

from __future__ import annotations

import logging
from typing import Any

from core.config import Settings, get_settings
from core.errors import MethodNotAllowed
from core.http import cors_headers, json_response, preflight_response, request_json, request_method
from core.providers import GeminiImageProvider
from core.proxy import transform_image

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("POST", "OPTIONS")


def handler(
    request: Any,
    settings: Settings | None = None,
    provider: GeminiImageProvider | None = None,
) -> dict[str, Any]:
    """Vercel Python serverless function handler."""
    settings = settings or get_settings()
    method = request_method(request)

    if method == "OPTIONS":
        return preflight_response(ALLOWED_METHODS, settings.cors_allow_origin)

    headers = cors_headers(ALLOWED_METHODS, settings.cors_allow_origin)

    if method != "POST":
        logger.warning("Rejected %s request to /generate", method or "<none>")
        result = MethodNotAllowed(method).to_result(expose_detail=settings.expose_error_details)
        return json_response(result.status_code, result.to_dict(), headers)

    result = transform_image(request_json(request), settings, provider=provider)
    return json_response(result.status_code, result.to_dict(), headers)
