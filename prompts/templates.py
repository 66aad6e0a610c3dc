"""Prompt templates for festive background replacement."""

from __future__ import annotations

from types import MappingProxyType

# --- Background instructions (the style catalog) ---

_BACKGROUNDS: dict[str, str] = {
    "alpine": (
        "Transform this into a festive photo in an Alpine winter wonderland. "
        "Keep the people exactly as they are but place them in front of snow-covered "
        "pine trees, glowing warm string lights, and mountains. "
        "The lighting should be soft and magical."
    ),
    "workshop": (
        "Transform this into a festive photo outside Santa's workshop. "
        "Keep the people exactly as they are but place them in a rustic wooden setting "
        "with snow on the roof, colorful lights, and blurred elves in the background."
    ),
    "village": (
        "Transform this into a festive photo in a Gingerbread Christmas Village. "
        "Keep the people exactly as they are but place them on a street with "
        "gingerbread storefronts, candy canes, and gentle falling snow."
    ),
}

BACKGROUNDS = MappingProxyType(_BACKGROUNDS)

# --- Model probing ---

PROBE_PROMPT = "Say 'hello' in one word"

PROBE_MODELS: tuple[str, ...] = (
    "gemini-2.5-flash-image",
    "gemini-2.0-flash",
    "gemini-1.5-pro",
    "gemini-1.5-flash",
    "models/gemini-2.5-flash-image",
    "models/gemini-2.0-flash",
    "models/gemini-1.5-flash",
)
