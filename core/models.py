"""Data models for the festive photo proxy."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

DEFAULT_MIME_TYPE = "image/jpeg"


class ErrorCategory(str, Enum):
    METHOD_NOT_ALLOWED = "method_not_allowed"
    MISSING_FIELD = "missing_field"
    INVALID_STYLE = "invalid_style"
    INVALID_IMAGE = "invalid_image"
    SERVER_MISCONFIGURED = "server_misconfigured"
    INVALID_CREDENTIAL = "invalid_credential"
    PERMISSION_DENIED = "permission_denied"
    QUOTA_EXCEEDED = "quota_exceeded"
    MODEL_UNAVAILABLE = "model_unavailable"
    NO_IMAGE = "no_image"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TransformRequest:
    image_data: str
    style_key: str
    mime_type: str = DEFAULT_MIME_TYPE

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> TransformRequest:
        """Read the wire field names without validating them."""
        return cls(
            image_data=payload.get("imageBase64") or "",
            style_key=payload.get("background") or "",
            mime_type=payload.get("mimeType") or DEFAULT_MIME_TYPE,
        )


@dataclass(frozen=True)
class ImageArtifact:
    mime_type: str
    data: str

    def to_dict(self) -> dict[str, str]:
        return {"mimeType": self.mime_type, "data": self.data}


@dataclass
class TransformResult:
    status_code: int = 200
    artifact: ImageArtifact | None = None
    error_message: str = ""
    error_category: ErrorCategory | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.artifact is not None

    @classmethod
    def success(cls, artifact: ImageArtifact) -> TransformResult:
        return cls(status_code=200, artifact=artifact)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON response body."""
        if self.artifact is not None:
            return {"success": True, "image": self.artifact.to_dict()}

        body: dict[str, Any] = {
            "success": False,
            "error": self.error_message,
            "category": self.error_category.value if self.error_category else None,
        }
        if self.detail is not None:
            body["details"] = self.detail
        return body


@dataclass
class ModelInfo:
    name: str
    display_name: str = ""
    description: str = ""
    supported_actions: list[str] = field(default_factory=list)
    input_token_limit: int | None = None
    output_token_limit: int | None = None

    @property
    def can_generate_images(self) -> bool:
        """Heuristic: supports generateContent and mentions images."""
        if "generateContent" not in self.supported_actions:
            return False
        text = f"{self.name} {self.description}".lower()
        return "image" in text

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "displayName": self.display_name,
            "description": self.description,
            "supportedMethods": list(self.supported_actions),
            "inputTokenLimit": self.input_token_limit,
            "outputTokenLimit": self.output_token_limit,
        }


@dataclass
class ProbeResult:
    model: str
    works: bool
    response: str = ""
    error: str = ""

    def to_dict(self) -> dict[str, Any]:
        row: dict[str, Any] = {"model": self.model, "status": "WORKS" if self.works else "FAILED"}
        if self.works:
            row["response"] = self.response
        else:
            row["error"] = self.error
        return row
