"""Person/company extraction from calendar event descriptions.

Consultants write ``Jane Doe - Acme Corp`` into the event description; that
convention is the only structured input a report is built from.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Mapping, Optional

from ..models import ExtractedEntities

logger = logging.getLogger(__name__)

# ``[^\W\d_]`` is a Unicode letter, ``[^\W_]`` a Unicode letter or digit.
# A name run never spans a hyphen, so each hyphen only needs the text back
# to the previous hyphen. The name is matched on that window reversed so it
# is anchored at the hyphen.
_REVERSED_NAME_RUN = re.compile(r"\s*([^\W\d_]+(?:\s+[^\W\d_]+)+)")
_COMPANY_RUN = re.compile(r"\s*((?:[^\W_]|[\s&.,])+)")  # letters, digits, whitespace, & . ,


def extract_person_and_company(description: Optional[str]) -> Optional[ExtractedEntities]:
    """Return the first ``Person Name - Company`` pair in *description*.

    The person is two or more letter-only words directly before a hyphen;
    the company is the run of letters, digits, whitespace, ``&``, ``.`` and
    ``,`` after it. A hyphen followed only by whitespace is skipped.

    ``None`` means no pair was found. That is a normal outcome for meetings
    that don't follow the convention, not an error.
    """
    if not description or "-" not in description:
        return None

    window_start = 0
    hyphen = description.find("-")
    while hyphen != -1:
        person = _REVERSED_NAME_RUN.match(description[window_start:hyphen][::-1])
        if person is not None:
            company = _COMPANY_RUN.match(description, hyphen + 1)
            company_name = company.group(1).strip() if company else ""
            if company_name:
                return ExtractedEntities(
                    person_name=person.group(1)[::-1],
                    company_name=company_name,
                )
        window_start = hyphen + 1
        hyphen = description.find("-", window_start)
    return None


def filter_relevant_events(events: Iterable[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    """Keep calendar events whose description names a person and company."""
    relevant: List[Mapping[str, Any]] = []
    for event in events:
        matched = extract_person_and_company(event.get("description")) is not None
        logger.debug("Event %r matches pattern: %s", event.get("summary"), matched)
        if matched:
            relevant.append(event)

    logger.info("Filtered to %d relevant events", len(relevant))
    return relevant


__all__ = ["extract_person_and_company", "filter_relevant_events"]
