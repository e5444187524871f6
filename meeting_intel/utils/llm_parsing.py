"""Utilities for parsing structured outputs returned by LLM calls.

Every prompt in this project asks the model for a single JSON object. The
contract here is two-stage: sanitize the text (strip code fences), then
parse it. Anything that does not come out as a JSON object is replaced by
an empty dict so callers can always fall back to their defaults.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from .text_cleaning import strip_code_fences

__all__ = ["parse_json_object"]

logger = logging.getLogger(__name__)


def parse_json_object(response_text: str | None) -> Dict[str, Any]:
    """Parse *response_text* into a dict, returning ``{}`` on failure.

    Parameters
    ----------
    response_text
        The raw message content returned by the completion API.

    Returns
    -------
    dict[str, Any]
        The parsed JSON object, or an empty dict when the text is empty,
        is not valid JSON, or holds a non-object top-level value.
    """

    cleaned: str = strip_code_fences(response_text)
    if not cleaned:
        return {}

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.warning("Failed to parse cleaned JSON, returning fallback: %s", exc)
        return {}

    if not isinstance(parsed, dict):
        logger.warning(
            "Expected a JSON object from the model, got %s – returning fallback",
            type(parsed).__name__,
        )
        return {}
    return parsed
