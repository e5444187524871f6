"""End-to-end report pipeline: extraction, research, synthesis and caching."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Mapping, Union

from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from ..clients.mongodb_client import create_mongo_client, get_reports_collection
from ..clients.openai_client import CompletionClient
from ..clients.tavily_client import WebSearchClient
from ..config import MONGODB_URI, OPENAI_API_KEY, TAVILY_API_KEY
from ..exceptions import UnresolvableEventError
from ..models import EventDetails, Report
from ..services.enrichment import research_company, research_person
from ..services.extraction import extract_person_and_company
from ..services.storage import ReportStore
from ..services.synthesis import generate_meeting_preparation
from ..utils.datetime_utils import get_current_timestamp

logger = logging.getLogger(__name__)

EventData = Union[EventDetails, Mapping[str, Any]]


class ReportService:
    """Public entry point for generating, listing and deleting reports.

    Every operation takes the owning ``user_id`` explicitly. The search and
    completion clients and the store are injected, so the whole pipeline can
    run against fakes.
    """

    def __init__(self, search: WebSearchClient, llm: CompletionClient, store: ReportStore):
        self._search = search
        self._llm = llm
        self._store = store

    def get_or_generate(self, event_id: str, user_id: str, event_data: EventData) -> Report:
        """Return the cached report for the event, generating it on a miss.

        Raises
        ------
        UnresolvableEventError
            If the description holds no ``Person Name - Company`` pair.
            Nothing is cached in that case.
        """
        cached = self._store.find(user_id, event_id)
        if cached is not None:
            logger.info("Cache hit for event %s (user %s)", event_id, user_id)
            return cached

        # eventId is unique across users: a shared calendar event has one report
        shared = self._store.find_by_event_id(event_id)
        if shared is not None:
            logger.info("Event %s already has a report from user %s – reusing it", event_id, shared.user_id)
            return shared

        logger.info("Cache miss for event %s (user %s) – generating report", event_id, user_id)
        report = self.generate_report(event_id, user_id, event_data)
        return self._store.insert(report)

    def generate_report(self, event_id: str, user_id: str, event_data: EventData) -> Report:
        """Run the full pipeline for one event without touching the cache."""
        event = event_data if isinstance(event_data, EventDetails) else EventDetails.from_mapping(event_data)

        # 1. Extract person + company
        entities = extract_person_and_company(event.description)
        if entities is None:
            logger.warning("No person/company found in description of event %s", event_id)
            raise UnresolvableEventError(event.description)

        # 2. Research both sides concurrently; each call absorbs its own failures
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="research") as pool:
            person_future = pool.submit(
                research_person, self._search, self._llm, entities.person_name, entities.company_name
            )
            company_future = pool.submit(research_company, self._search, self._llm, entities.company_name)
            person = person_future.result()
            company = company_future.result()

        # 3. Summary + tips
        preparation = generate_meeting_preparation(self._llm, entities, person, company, event)

        now = get_current_timestamp()
        return Report(
            event_id=event_id,
            user_id=user_id,
            event_details=event,
            extracted_info=entities,
            person_intelligence=person,
            company_intelligence=company,
            generated_summary=preparation.summary,
            preparation_tips=preparation.tips,
            created_at=now,
            last_updated=now,
        )

    def list_reports(self, user_id: str) -> List[Report]:
        return self._store.list_by_user(user_id)

    def delete_report(self, report_id: str, user_id: str) -> None:
        """Delete one of the user's reports; a missing or foreign report is ignored."""
        if not self._store.delete_one(report_id, user_id):
            logger.info("No report %s owned by user %s to delete", report_id, user_id)

    def clear_reports(self, user_id: str) -> int:
        return self._store.clear_all(user_id)


def create_report_service(
    tavily_api_key: str | None = TAVILY_API_KEY,
    openai_api_key: str | None = OPENAI_API_KEY,
    mongodb_uri: str | None = MONGODB_URI,
) -> ReportService:
    """Build a :class:`ReportService` wired to the real external services."""
    search = WebSearchClient.from_api_key(tavily_api_key)
    llm = CompletionClient.from_api_key(openai_api_key)
    store = ReportStore(get_reports_collection(create_mongo_client(mongodb_uri)))
    store.ensure_indexes()
    logger.info("Report service ready")
    return ReportService(search, llm, store)


__all__ = ["ReportService", "create_report_service"]
