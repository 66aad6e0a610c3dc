"""Diagnostic endpoint: list the Gemini models available to the configured key."""

from __future__ import annotations

import logging
from typing import Any

from core.config import Settings, get_settings
from core.http import cors_headers, json_response, preflight_response, request_method
from core.providers import GeminiImageProvider, get_provider

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("GET", "OPTIONS")


def handler(
    request: Any,
    settings: Settings | None = None,
    provider: GeminiImageProvider | None = None,
) -> dict[str, Any]:
    settings = settings or get_settings()

    if request_method(request) == "OPTIONS":
        return preflight_response(ALLOWED_METHODS, settings.cors_allow_origin)

    headers = cors_headers(ALLOWED_METHODS, settings.cors_allow_origin)

    if not settings.has_api_key:
        logger.error("GEMINI_API_KEY not found in environment variables")
        return json_response(500, {"error": "API key not configured"}, headers)

    provider = provider or get_provider(settings)
    try:
        models = provider.list_models()
    except Exception as e:
        logger.exception("Error listing models")
        return json_response(500, {"error": str(e), "details": "Failed to list models"}, headers)

    body = {
        "success": True,
        "totalModels": len(models),
        "models": [m.to_dict() for m in models],
        "availableForImageGeneration": [m.name for m in models if m.can_generate_images],
    }
    return json_response(200, body, headers)
