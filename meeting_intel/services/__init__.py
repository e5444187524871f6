"""Service layer modules grouping business logic by concern.

This module provides convenience re-exports so that callers can simply do for
example `from meeting_intel.services import research_person` without having to
know which underlying module provides the symbol.
"""

from .extraction import extract_person_and_company, filter_relevant_events  # noqa: F401
from .enrichment import research_person, research_company  # noqa: F401
from .synthesis import generate_meeting_preparation  # noqa: F401
from .storage import ReportStore  # noqa: F401

__all__ = [
    "extract_person_and_company",
    "filter_relevant_events",
    "research_person",
    "research_company",
    "generate_meeting_preparation",
    "ReportStore",
]
