"""Meeting preparation summary and tips generated from the research."""

from __future__ import annotations

import logging
from typing import List

from ..clients.openai_client import CompletionClient
from ..config import SYNTHESIS_TEMPERATURE
from ..models import (
    CompanyIntelligence,
    EventDetails,
    ExtractedEntities,
    MeetingPreparation,
    PersonIntelligence,
)
from ..utils.llm_parsing import parse_json_object

logger = logging.getLogger(__name__)

FALLBACK_SUMMARY: str = "Meeting preparation analysis unavailable."
FALLBACK_TIPS: List[str] = [
    "Review meeting agenda",
    "Prepare relevant questions",
    "Research company background",
]
TARGET_TIP_COUNT: int = 5


def fallback_preparation() -> MeetingPreparation:
    return MeetingPreparation(summary=FALLBACK_SUMMARY, tips=list(FALLBACK_TIPS))


def _build_prompt(
    entities: ExtractedEntities,
    person: PersonIntelligence,
    company: CompanyIntelligence,
    event: EventDetails,
) -> str:
    return (
        "As a business consultant, generate a professional meeting preparation summary"
        " and actionable tips based on the following information:\n\n"
        f"Meeting: {event.title}\n"
        f"Person: {entities.person_name} - {person.job_title}\n"
        f"Company: {entities.company_name} - {company.industry}\n\n"
        f"Person Background: {person.background}\n"
        f"Company Description: {company.description}\n\n"
        "Generate:\n"
        "1. A concise meeting summary (2-3 sentences)\n"
        f"2. {TARGET_TIP_COUNT} actionable preparation tips for the consultant, each a"
        " standalone instruction\n\n"
        "Respond with ONLY a JSON object – no markdown, no commentary – with fields:"
        " summary (string), tips (array of strings)"
    )


def generate_meeting_preparation(
    llm: CompletionClient,
    entities: ExtractedEntities,
    person: PersonIntelligence,
    company: CompanyIntelligence,
    event: EventDetails,
) -> MeetingPreparation:
    """Combine person + company research into a summary and ordered tips.

    Never raises: a failed call yields :func:`fallback_preparation`, and a
    reply missing either field gets the fallback value for that field.
    """
    logger.info("Generating meeting preparation for: %s", event.title)
    try:
        raw = llm.complete(
            _build_prompt(entities, person, company, event),
            temperature=SYNTHESIS_TEMPERATURE,
        )
        parsed = parse_json_object(raw)
    except Exception as exc:
        logger.error("Error generating meeting preparation: %s", exc)
        return fallback_preparation()

    summary = parsed.get("summary")
    if not isinstance(summary, str) or not summary.strip():
        logger.warning("Model reply had no usable summary – using fallback summary")
        summary = FALLBACK_SUMMARY

    raw_tips = parsed.get("tips")
    tips: List[str] = []
    if isinstance(raw_tips, list):
        tips = [str(tip).strip() for tip in raw_tips if tip is not None and str(tip).strip()]
    if not tips:
        logger.warning("Model reply had no usable tips – using fallback tips")
        tips = list(FALLBACK_TIPS)

    return MeetingPreparation(summary=summary.strip(), tips=tips)


__all__ = ["generate_meeting_preparation", "fallback_preparation", "FALLBACK_SUMMARY", "FALLBACK_TIPS"]
