"""Process-wide configuration loaded from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

API_KEY_ENV_NAMES: tuple[str, ...] = ("GEMINI_API_KEY", "GOOGLE_API_KEY")
DEFAULT_MODEL = "gemini-2.5-flash-image"


def resolve_api_key(explicit: str | None, *env_names: str) -> str:
    """Return the explicit key if given, else the first non-empty env var."""
    if explicit and explicit.strip():
        return explicit.strip()
    for name in env_names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    model: str = DEFAULT_MODEL
    expose_error_details: bool = False
    cors_allow_origin: str = "*"

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @property
    def api_key_prefix(self) -> str:
        """Short non-secret prefix for diagnostics."""
        if not self.api_key:
            return "NOT SET"
        return self.api_key[:6] + "..."


def load_settings(api_key: str | None = None) -> Settings:
    """Build settings from the environment (and a local .env file, if any)."""
    load_dotenv()
    return Settings(
        api_key=resolve_api_key(api_key, *API_KEY_ENV_NAMES),
        model=os.environ.get("GEMINI_MODEL", "").strip() or DEFAULT_MODEL,
        expose_error_details=os.environ.get("APP_ENV", "").strip().lower() == "development",
        cors_allow_origin=os.environ.get("CORS_ALLOW_ORIGIN", "").strip() or "*",
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
