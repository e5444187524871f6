"""Centralised configuration for meeting_intel.

Environment variables are loaded once and all related constants are
grouped by service for easier maintenance. Only the startup factory in
:mod:`meeting_intel.workflows.report_pipeline` reads the credentials; every
other component receives ready-built clients.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Core credentials (from environment)
# ---------------------------------------------------------------------------
OPENAI_API_KEY: str | None = os.getenv("OPENAI_API_KEY")
TAVILY_API_KEY: str | None = os.getenv("TAVILY_API_KEY")
MONGODB_URI: str | None = os.getenv("MONGODB_URI")

# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------
MONGODB_DATABASE: str = os.getenv("MONGODB_DATABASE", "meeting_intel")
REPORTS_COLLECTION: str = "reports"

# ---------------------------------------------------------------------------
# OpenAI settings
# ---------------------------------------------------------------------------
OPENAI_MODEL: str = "gpt-4o-mini"
RESEARCH_TEMPERATURE: float = 0.3  # fact extraction from search results
SYNTHESIS_TEMPERATURE: float = 0.7  # narrative summary + tips

# ---------------------------------------------------------------------------
# Tavily settings
# ---------------------------------------------------------------------------
# accepted values: "basic", "advanced"
TAVILY_SEARCH_DEPTH: str = "advanced"
PERSON_SEARCH_MAX_RESULTS: int = 3
COMPANY_SEARCH_MAX_RESULTS: int = 5

# ---------------------------------------------------------------------------
# Miscellaneous
# ---------------------------------------------------------------------------
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # credentials
    "OPENAI_API_KEY",
    "TAVILY_API_KEY",
    "MONGODB_URI",
    # storage
    "MONGODB_DATABASE",
    "REPORTS_COLLECTION",
    # openai
    "OPENAI_MODEL",
    "RESEARCH_TEMPERATURE",
    "SYNTHESIS_TEMPERATURE",
    # tavily
    "TAVILY_SEARCH_DEPTH",
    "PERSON_SEARCH_MAX_RESULTS",
    "COMPANY_SEARCH_MAX_RESULTS",
    # misc
    "LOG_LEVEL",
]
