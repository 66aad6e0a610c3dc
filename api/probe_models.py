"""Diagnostic endpoint: probe a fixed list of model names and report which respond."""

from __future__ import annotations

import logging
from typing import Any

from core.config import Settings, get_settings
from core.http import cors_headers, json_response, preflight_response, request_method
from core.providers import GeminiImageProvider, get_provider
from prompts.templates import PROBE_MODELS

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
    results = [provider.probe_model(name) for name in PROBE_MODELS]
    working = [r.model for r in results if r.works]
    logger.info("Model probe: %d/%d working", len(working), len(results))

    if working:
        recommendation = f"Use this model: {working[0]}"
    else:
        recommendation = "No working models found. Your API key may not have access to Gemini."

    body = {
        "success": True,
        "apiKeyWorks": True,
        "testResults": [r.to_dict() for r in results],
        "workingModels": working,
        "recommendation": recommendation,
    }
    return json_response(200, body, headers)
