"""Image transformation proxy: validate, map style to prompt, invoke, extract."""

from __future__ import annotations

import base64
import binascii
import logging
import re
from typing import Any

from core.config import Settings
from core.errors import (
    InvalidImageData,
    InvalidStyle,
    MissingField,
    ProxyError,
    ServerConfigError,
    classify_remote_error,
)
from core.models import TransformRequest, TransformResult
from core.providers import GeminiImageProvider, extract_artifact, get_provider
from prompts.templates import BACKGROUNDS

logger = logging.getLogger(__name__)

_DATA_URL = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?:;[\w.+-]+=[^;,]*)*;base64,", re.IGNORECASE
)
_MIME_TYPE = re.compile(r"^[\w.+-]+/[\w.+-]+$")


def _split_data_url(payload: dict[str, Any]) -> dict[str, Any]:
    """Strip a data URL prefix from imageBase64, keeping its media type as a default."""
    image = payload.get("imageBase64")
    if not isinstance(image, str):
        return payload
    match = _DATA_URL.match(image)
    if not match:
        return payload
    cleaned = dict(payload)
    cleaned["imageBase64"] = image[match.end():]
    if not cleaned.get("mimeType") and match.group("mime"):
        cleaned["mimeType"] = match.group("mime")
    return cleaned


def decode_image(image_data: str) -> bytes:
    try:
        raw = base64.b64decode("".join(image_data.split()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageData("imageBase64 is not valid base64 data", detail=str(e)) from e
    if not raw:
        raise InvalidImageData("imageBase64 decoded to an empty payload")
    return raw


def validate_request(payload: dict[str, Any]) -> TransformRequest:
    """Check request shape and style; raises a ClientInputError before any remote call."""
    request = TransformRequest.from_payload(_split_data_url(payload))

    if not isinstance(request.image_data, str) or not request.image_data or not request.style_key:
        raise MissingField("Missing required fields: imageBase64 and background")

    if not isinstance(request.style_key, str) or request.style_key not in BACKGROUNDS:
        raise InvalidStyle("Invalid background selection", detail=repr(request.style_key))

    if not isinstance(request.mime_type, str) or not _MIME_TYPE.match(request.mime_type):
        raise InvalidImageData(
            "mimeType must be a media type such as image/jpeg",
            detail=repr(request.mime_type),
        )

    return request


def transform_image(
    payload: dict[str, Any],
    settings: Settings,
    provider: GeminiImageProvider | None = None,
) -> TransformResult:
    """Run the whole validate -> invoke -> extract sequence for one request.

    Every failure is logged with its full detail and returned as a failed
    TransformResult; raw detail reaches the client only when
    ``settings.expose_error_details`` is on.
    """
    try:
        if not settings.has_api_key:
            raise ServerConfigError("GEMINI_API_KEY not found in environment variables")

        request = validate_request(payload)
        image_bytes = decode_image(request.image_data)
        instruction = BACKGROUNDS[request.style_key]

        if provider is None:
            provider = get_provider(settings)

        try:
            response = provider.edit_image(instruction, image_bytes, request.mime_type)
        except Exception as e:
            logger.exception("Error generating image")
            raise classify_remote_error(e) from e

        artifact = extract_artifact(response)

    except ProxyError as e:
        logger.error(
            "Request failed: status=%d category=%s message=%s detail=%s",
            e.status_code, e.category.value, e.message, e.detail,
        )
        return e.to_result(expose_detail=settings.expose_error_details)

    logger.info("Generated %s image for background=%s", artifact.mime_type, request.style_key)
    return TransformResult.success(artifact)
