from pathlib import Path
import base64
import json
import sys
from types import SimpleNamespace

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.config import Settings
from core.models import ModelInfo, ProbeResult

IMAGE_BYTES = b"\xff\xd8\xff\xe0fake-jpeg-bytes"
IMAGE_B64 = base64.b64encode(IMAGE_BYTES).decode("ascii")


def make_response(*parts):
    """Build an object shaped like a google-genai GenerateContentResponse."""
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))])


def image_part(data=b"png-bytes", mime_type="image/png"):
    return SimpleNamespace(inline_data=SimpleNamespace(data=data, mime_type=mime_type), text=None)


def text_part(text):
    return SimpleNamespace(inline_data=None, text=text)


class FakeRemoteError(Exception):
    def __init__(self, message, code=None):
        super().__init__(message)
        self.code = code


class FakeProvider:
    """Stands in for GeminiImageProvider and records every remote call."""

    def __init__(self, response=None, error=None, models=None, working=()):
        self.response = response if response is not None else make_response(image_part())
        self.error = error
        self.models = models or []
        self.working = set(working)
        self.calls = []
        self.probed = []

    def edit_image(self, instruction, image_bytes, mime_type):
        self.calls.append((instruction, image_bytes, mime_type))
        if self.error is not None:
            raise self.error
        return self.response

    def list_models(self):
        if self.error is not None:
            raise self.error
        return list(self.models)

    def probe_model(self, model_name):
        self.probed.append(model_name)
        if model_name in self.working:
            return ProbeResult(model=model_name, works=True, response="hello")
        return ProbeResult(model=model_name, works=False, error="404 NOT_FOUND")


@pytest.fixture
def settings():
    return Settings(api_key="AIzaTestKey1234567890", model="test-model")


@pytest.fixture
def dev_settings():
    return Settings(api_key="AIzaTestKey1234567890", model="test-model", expose_error_details=True)


@pytest.fixture
def no_key_settings():
    return Settings(api_key="")


@pytest.fixture
def provider():
    return FakeProvider()


def post(payload, method="POST"):
    return {"method": method, "body": json.dumps(payload)}


def body_of(response):
    return json.loads(response["body"]) if response["body"] else None


def sample_models():
    return [
        ModelInfo(
            name="models/gemini-2.5-flash-image",
            description="Gemini image generation and editing model",
            supported_actions=["generateContent", "countTokens"],
        ),
        ModelInfo(
            name="models/text-embedding-004",
            description="Obtain a distributed representation of a text.",
            supported_actions=["embedContent"],
        ),
        ModelInfo(
            name="models/gemini-2.0-flash",
            description="Fast and versatile multimodal model",
            supported_actions=["generateContent"],
        ),
    ]
