"""Shared helpers for cleaning raw LLM output."""

from __future__ import annotations

from typing import Final

_JSON_FENCE: Final[str] = "```json"
_FENCE: Final[str] = "```"


def strip_code_fences(text: str | None) -> str:
    """Remove Markdown code-fence wrapping from an LLM response.

    Handles ```` ```json ```` and bare ```` ``` ```` openers as well as a
    trailing fence. Text without fences is returned stripped.
    """
    if not text:
        return ""

    cleaned: str = text.strip()

    if cleaned.startswith(_JSON_FENCE):
        cleaned = cleaned[len(_JSON_FENCE) :].strip()
    elif cleaned.startswith(_FENCE):
        cleaned = cleaned[len(_FENCE) :].strip()
    if cleaned.endswith(_FENCE):
        cleaned = cleaned[: -len(_FENCE)].strip()

    return cleaned


__all__ = ["strip_code_fences"]
