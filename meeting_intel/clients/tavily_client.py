"""Web search through the Tavily API."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from tavily import TavilyClient

from ..config import TAVILY_SEARCH_DEPTH

logger = logging.getLogger(__name__)


class WebSearchClient:
    """Thin wrapper around :class:`tavily.TavilyClient`.

    Built once at startup with its API key and passed to the services that
    need it, so tests can hand in any object with the same ``search`` method.
    """

    def __init__(self, client: TavilyClient, search_depth: str = TAVILY_SEARCH_DEPTH):
        self._client = client
        self.search_depth = search_depth

    @classmethod
    def from_api_key(cls, api_key: str | None) -> "WebSearchClient":
        if not api_key:
            raise EnvironmentError("TAVILY_API_KEY is not set in environment variables")
        return cls(TavilyClient(api_key=api_key))

    def search(self, query: str, max_results: int) -> List[Dict[str, Any]]:
        """Return up to *max_results* hits as ``{title, content, url}`` dicts."""
        logger.debug("Tavily search (%d results): %s", max_results, query)
        response = self._client.search(
            query=query,
            search_depth=self.search_depth,
            max_results=max_results,
            include_answer=True,
            include_images=False,
            include_raw_content=False,
        )
        return list(response.get("results") or [])


__all__ = ["WebSearchClient"]
