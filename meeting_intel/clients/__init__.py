"""Convenience re-exports for the external service clients."""

from .openai_client import CompletionClient  # noqa: F401
from .tavily_client import WebSearchClient  # noqa: F401
from .mongodb_client import create_mongo_client, get_reports_collection  # noqa: F401

__all__ = [
    "CompletionClient",
    "WebSearchClient",
    "create_mongo_client",
    "get_reports_collection",
]
