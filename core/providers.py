"""Gemini image editing provider and response parsing."""

from __future__ import annotations

import base64
import logging
from functools import lru_cache
from typing import Any

from core.config import Settings
from core.errors import RemoteContentError
from core.models import ImageArtifact, ModelInfo, ProbeResult
from prompts.templates import PROBE_PROMPT

logger = logging.getLogger(__name__)

# Fixed generation policy; never taken from the request.
TEMPERATURE = 0.9
TOP_K = 32
TOP_P = 1.0
MAX_OUTPUT_TOKENS = 4096
RESPONSE_MODALITIES = ("TEXT", "IMAGE")


class GeminiImageProvider:
    """Google Gemini multimodal provider for background replacement."""

    provider_name = "gemini"

    def __init__(self, api_key: str, model: str) -> None:
        if not api_key:
            raise ValueError("Gemini API key is required. Set GEMINI_API_KEY or pass api_key.")
        self.api_key = api_key
        self.model = model
        self._client = None

    @classmethod
    def from_settings(cls, settings: Settings) -> GeminiImageProvider:
        return cls(api_key=settings.api_key, model=settings.model)

    def _get_client(self):
        if self._client is None:
            from google import genai
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def edit_image(self, instruction: str, image_bytes: bytes, mime_type: str) -> Any:
        """Submit one instruction + image generation call and return the raw response."""
        from google.genai import types

        client = self._get_client()
        logger.info("Editing image via Gemini model=%s (%d bytes, %s)", self.model, len(image_bytes), mime_type)

        return client.models.generate_content(
            model=self.model,
            contents=[
                instruction,
                types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
            ],
            config=types.GenerateContentConfig(
                temperature=TEMPERATURE,
                top_k=TOP_K,
                top_p=TOP_P,
                max_output_tokens=MAX_OUTPUT_TOKENS,
                response_modalities=list(RESPONSE_MODALITIES),
            ),
        )

    def list_models(self) -> list[ModelInfo]:
        client = self._get_client()
        models = []
        for model in client.models.list():
            models.append(ModelInfo(
                name=model.name or "",
                display_name=getattr(model, "display_name", None) or "",
                description=getattr(model, "description", None) or "",
                supported_actions=list(getattr(model, "supported_actions", None) or []),
                input_token_limit=getattr(model, "input_token_limit", None),
                output_token_limit=getattr(model, "output_token_limit", None),
            ))
        logger.info("Listed %d models", len(models))
        return models

    def probe_model(self, model_name: str) -> ProbeResult:
        """Try a tiny text generation against one model; report instead of raising."""
        client = self._get_client()
        try:
            response = client.models.generate_content(model=model_name, contents=PROBE_PROMPT)
            text = (response.text or "").strip()
        except Exception as e:
            logger.warning("Model probe failed for %s: %s", model_name, e)
            return ProbeResult(model=model_name, works=False, error=str(e))
        return ProbeResult(model=model_name, works=True, response=text)


@lru_cache
def get_provider(settings: Settings) -> GeminiImageProvider:
    """One provider (and one genai.Client) per settings for the life of the process."""
    return GeminiImageProvider.from_settings(settings)


def response_parts(response: Any) -> list[Any]:
    """Return the content parts of the first candidate, or an empty list."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    return list(getattr(content, "parts", None) or [])


def extract_artifact(response: Any) -> ImageArtifact:
    """Pick the first inline-data part; fall back to text, then a generic message."""
    parts = response_parts(response)

    for part in parts:
        inline = getattr(part, "inline_data", None)
        if inline is not None and getattr(inline, "data", None):
            data = inline.data
            if isinstance(data, (bytes, bytearray)):
                data = base64.b64encode(data).decode("ascii")
            return ImageArtifact(mime_type=inline.mime_type or "image/png", data=data)

    for part in parts:
        text = getattr(part, "text", None)
        if text:
            raise RemoteContentError(text)

    raise RemoteContentError()
