"""Text completion through the OpenAI chat API."""

from __future__ import annotations

import logging

from openai import OpenAI as _OpenAIClient

from ..config import OPENAI_MODEL

logger = logging.getLogger(__name__)


class CompletionClient:
    """Single-prompt completion on top of :class:`openai.OpenAI`."""

    def __init__(self, client: _OpenAIClient, model: str = OPENAI_MODEL):
        self._client = client
        self.model = model

    @classmethod
    def from_api_key(cls, api_key: str | None) -> "CompletionClient":
        if not api_key:
            raise EnvironmentError("OPENAI_API_KEY is not set in environment variables")
        return cls(_OpenAIClient(api_key=api_key))

    def complete(self, prompt: str, *, temperature: float) -> str:
        """Send *prompt* as the user message and return the reply text."""
        resp = self._client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
        )
        content = resp.choices[0].message.content or ""
        logger.debug("Raw %s response: %s", self.model, content)
        return content


__all__ = ["CompletionClient"]
