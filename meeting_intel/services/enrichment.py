"""Person and company research – Tavily search summarised by OpenAI.

Both lookups follow the same protocol: search the web with a fixed query
template, hand the hits to the model with a strict JSON instruction, parse
the reply defensively and tag the result with its provenance. Any failure
along the way yields the fixed ``unavailable()`` value instead of an error,
so one broken source never stops a report from being built.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..clients.openai_client import CompletionClient
from ..clients.tavily_client import WebSearchClient
from ..config import (
    COMPANY_SEARCH_MAX_RESULTS,
    PERSON_SEARCH_MAX_RESULTS,
    RESEARCH_TEMPERATURE,
)
from ..models import COMPANY_SOURCE, PERSON_SOURCE, CompanyIntelligence, PersonIntelligence
from ..utils.llm_parsing import parse_json_object

logger = logging.getLogger(__name__)

PERSON_QUERY_TEMPLATE: str = "{name} {company} linkedin profile job title"
COMPANY_QUERY_TEMPLATE: str = "{company} company information business industry news"


def _format_results(results: List[Dict[str, Any]]) -> str:
    """Join each hit's title and content into one corpus for the model."""
    return "\n".join(f"{res.get('title', '')}: {res.get('content', '')}" for res in results)


def research_person(
    search: WebSearchClient,
    llm: CompletionClient,
    person_name: str,
    company_name: str,
) -> PersonIntelligence:
    """Look up *person_name* at *company_name*."""
    logger.info("Researching person via Tavily: %s (%s)", person_name, company_name)
    try:
        results = search.search(
            PERSON_QUERY_TEMPLATE.format(name=person_name, company=company_name),
            max_results=PERSON_SEARCH_MAX_RESULTS,
        )
        if not results:
            logger.warning("Tavily returned no results for person %s", person_name)

        prompt = (
            f"Analyze the following search results about {person_name} from {company_name}."
            " Extract key information including job title, background, and recent news."
            " Respond with ONLY a JSON object – no markdown, no commentary – with fields:"
            " jobTitle (string), background (string), recentNews (array of strings),"
            " linkedInProfile (string URL or empty string).\n\n"
            f"Search Results:\n{_format_results(results)}"
        )
        raw = llm.complete(prompt, temperature=RESEARCH_TEMPERATURE)
        analysis = parse_json_object(raw)
    except Exception as exc:
        logger.error("Error getting person intelligence for %s: %s", person_name, exc)
        return PersonIntelligence.unavailable()

    return PersonIntelligence.from_analysis(analysis, source=PERSON_SOURCE)


def research_company(
    search: WebSearchClient,
    llm: CompletionClient,
    company_name: str,
) -> CompanyIntelligence:
    """Look up *company_name*."""
    logger.info("Researching company via Tavily: %s", company_name)
    try:
        results = search.search(
            COMPANY_QUERY_TEMPLATE.format(company=company_name),
            max_results=COMPANY_SEARCH_MAX_RESULTS,
        )
        if not results:
            logger.warning("Tavily returned no results for company %s", company_name)

        prompt = (
            f"Analyze the following search results about {company_name}."
            " Extract key company information including description, industry, size,"
            " recent news, and website. Respond with ONLY a JSON object – no markdown,"
            " no commentary – with fields: description (string), industry (string),"
            " size (string), recentNews (array of strings), website (string URL or"
            " empty string).\n\n"
            f"Search Results:\n{_format_results(results)}"
        )
        raw = llm.complete(prompt, temperature=RESEARCH_TEMPERATURE)
        analysis = parse_json_object(raw)
    except Exception as exc:
        logger.error("Error getting company intelligence for %s: %s", company_name, exc)
        return CompanyIntelligence.unavailable()

    return CompanyIntelligence.from_analysis(analysis, source=COMPANY_SOURCE)


__all__ = ["research_person", "research_company"]
