"""Health endpoint: reports whether the Gemini credential is configured.

Only a short prefix of the key is ever echoed back.
"""

from __future__ import annotations

import platform
from datetime import datetime, timezone
from typing import Any

from core.config import Settings, get_settings
from core.http import cors_headers, json_response, preflight_response, request_method

ALLOWED_METHODS = ("GET", "OPTIONS")


def handler(request: Any, settings: Settings | None = None) -> dict[str, Any]:
    """Vercel Python serverless function handler."""
    settings = settings or get_settings()

    if request_method(request) == "OPTIONS":
        return preflight_response(ALLOWED_METHODS, settings.cors_allow_origin)

    if settings.has_api_key:
        message = "API key is set correctly!"
    else:
        message = "ERROR: GEMINI_API_KEY is missing! Add it in Vercel Settings -> Environment Variables"

    body = {
        "status": "API endpoint is working!",
        "environmentVariables": {
            "GEMINI_API_KEY_exists": settings.has_api_key,
            "GEMINI_API_KEY_prefix": settings.api_key_prefix,
            "message": message,
        },
        "model": settings.model,
        "pythonVersion": platform.python_version(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    return json_response(200, body, cors_headers(ALLOWED_METHODS, settings.cors_allow_origin))
