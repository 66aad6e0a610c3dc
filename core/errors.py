"""Error taxonomy and the remote error classifier."""

from __future__ import annotations

from typing import Callable

from core.models import ErrorCategory, TransformResult

GENERIC_FAILURE_MESSAGE = "Failed to generate image. Please try again."
NO_IMAGE_MESSAGE = "No image returned from AI"


class ProxyError(Exception):
    """Base error; carries the HTTP status and a client-safe message."""

    status_code: int = 500
    category: ErrorCategory = ErrorCategory.UNKNOWN

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_result(self, expose_detail: bool = False) -> TransformResult:
        return TransformResult(
            status_code=self.status_code,
            error_message=self.message,
            error_category=self.category,
            detail=self.detail if expose_detail else None,
        )


class ClientInputError(ProxyError):
    status_code = 400


class MethodNotAllowed(ClientInputError):
    status_code = 405
    category = ErrorCategory.METHOD_NOT_ALLOWED

    def __init__(self, method: str = "") -> None:
        super().__init__("Method not allowed", detail=method or None)


class MissingField(ClientInputError):
    category = ErrorCategory.MISSING_FIELD


class InvalidStyle(ClientInputError):
    category = ErrorCategory.INVALID_STYLE


class InvalidImageData(ClientInputError):
    category = ErrorCategory.INVALID_IMAGE


class ServerConfigError(ProxyError):
    category = ErrorCategory.SERVER_MISCONFIGURED

    def __init__(self, detail: str | None = None) -> None:
        super().__init__("Server configuration error. Please contact administrator.", detail)


class RemoteServiceError(ProxyError):
    def __init__(self, message: str, category: ErrorCategory, detail: str | None = None) -> None:
        super().__init__(message, detail)
        self.category = category


class RemoteContentError(ProxyError):
    category = ErrorCategory.NO_IMAGE

    def __init__(self, explanation: str | None = None) -> None:
        super().__init__(f"AI generation failed: {explanation or NO_IMAGE_MESSAGE}", explanation)


def _message_contains(marker: str) -> Callable[[BaseException], bool]:
    def predicate(exc: BaseException) -> bool:
        return marker in str(exc)
    return predicate


def _http_status_is(code: int) -> Callable[[BaseException], bool]:
    def predicate(exc: BaseException) -> bool:
        # google.genai APIError exposes the HTTP status as `code`
        return getattr(exc, "code", None) == code or getattr(exc, "status", None) == code
    return predicate


ErrorRule = tuple[Callable[[BaseException], bool], ErrorCategory, str]

# Evaluated in order; first match wins.
ERROR_RULES: tuple[ErrorRule, ...] = (
    (
        _message_contains("API_KEY_INVALID"),
        ErrorCategory.INVALID_CREDENTIAL,
        "API key is invalid. Please check your configuration.",
    ),
    (
        _message_contains("PERMISSION_DENIED"),
        ErrorCategory.PERMISSION_DENIED,
        "API permission denied. Please enable the Gemini API in Google Cloud Console.",
    ),
    (
        _message_contains("QUOTA_EXCEEDED"),
        ErrorCategory.QUOTA_EXCEEDED,
        "API quota exceeded. Please check your Google Cloud Console.",
    ),
    (
        _http_status_is(404),
        ErrorCategory.MODEL_UNAVAILABLE,
        "AI model not available. Please contact support.",
    ),
)


def classify_remote_error(exc: BaseException) -> RemoteServiceError:
    """Map a remote SDK exception onto a safe, categorized error."""
    for predicate, category, message in ERROR_RULES:
        if predicate(exc):
            return RemoteServiceError(message, category, detail=str(exc))
    return RemoteServiceError(GENERIC_FAILURE_MESSAGE, ErrorCategory.UNKNOWN, detail=str(exc))
