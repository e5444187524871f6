"""Domain models used across the project.

Field names are snake_case in Python; ``to_document``/``from_document``
translate to the camelCase keys stored in MongoDB.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from .utils.datetime_utils import get_current_timestamp, parse_timestamp

# Source provenance tags
PERSON_SOURCE: str = "OpenAI + Tavily"
COMPANY_SOURCE: str = "Tavily + OpenAI"
ERROR_SOURCE: str = "Error"

UNAVAILABLE: str = "Unable to retrieve information"
UNKNOWN: str = "Unknown"


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _string_list(value: Any) -> List[str]:
    """Coerce model output into a list of strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if not isinstance(value, (list, tuple)):
        return [_text(value)]
    return [_text(item) for item in value if item is not None]


@dataclass(slots=True, frozen=True)
class ExtractedEntities:
    """The ``Person Name - Company`` pair found in an event description."""

    person_name: str
    company_name: str

    def to_document(self) -> Dict[str, Any]:
        return {"personName": self.person_name, "companyName": self.company_name}

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "ExtractedEntities":
        return cls(
            person_name=_text(doc.get("personName")),
            company_name=_text(doc.get("companyName")),
        )


@dataclass(slots=True)
class EventDetails:
    """Snapshot of the calendar event a report was generated for."""

    title: str = ""
    description: str = ""
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    attendees: List[str] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EventDetails":
        """Build from request-style data ``{title, description, startTime, endTime, attendees}``."""
        return cls(
            title=_text(data.get("title", data.get("summary"))),
            description=_text(data.get("description")),
            start_time=parse_timestamp(data.get("startTime")),
            end_time=parse_timestamp(data.get("endTime")),
            attendees=_string_list(data.get("attendees")),
        )

    @classmethod
    def from_calendar_event(cls, event: Mapping[str, Any]) -> "EventDetails":
        """Build from a calendar item as returned by the calendar provider.

        ``start``/``end`` hold either ``dateTime`` or, for all-day events,
        ``date``. Attendees may be plain strings or ``{email, displayName}``
        objects.
        """
        start = event.get("start") or {}
        end = event.get("end") or {}
        attendees: List[str] = []
        for attendee in event.get("attendees") or []:
            if isinstance(attendee, Mapping):
                name = attendee.get("email") or attendee.get("displayName")
                if name:
                    attendees.append(_text(name))
            elif attendee:
                attendees.append(_text(attendee))

        return cls(
            title=_text(event.get("summary")),
            description=_text(event.get("description")),
            start_time=parse_timestamp(start.get("dateTime") or start.get("date")),
            end_time=parse_timestamp(end.get("dateTime") or end.get("date")),
            attendees=attendees,
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "attendees": list(self.attendees),
        }

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "EventDetails":
        return cls(
            title=_text(doc.get("title")),
            description=_text(doc.get("description")),
            start_time=parse_timestamp(doc.get("startTime")),
            end_time=parse_timestamp(doc.get("endTime")),
            attendees=_string_list(doc.get("attendees")),
        )


@dataclass(slots=True)
class PersonIntelligence:
    """What web research turned up about the person being met."""

    job_title: str = ""
    background: Any = ""  # free text or a structured object from the model
    recent_news: List[str] = field(default_factory=list)
    linked_in_profile: str = ""
    source: str = PERSON_SOURCE

    @classmethod
    def from_analysis(cls, analysis: Mapping[str, Any], source: str = PERSON_SOURCE) -> "PersonIntelligence":
        background = analysis.get("background")
        return cls(
            job_title=_text(analysis.get("jobTitle")),
            background="" if background is None else background,
            recent_news=_string_list(analysis.get("recentNews")),
            linked_in_profile=_text(analysis.get("linkedInProfile")),
            source=source,
        )

    @classmethod
    def unavailable(cls) -> "PersonIntelligence":
        return cls(
            job_title=UNKNOWN,
            background=UNAVAILABLE,
            recent_news=[],
            linked_in_profile="",
            source=ERROR_SOURCE,
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "jobTitle": self.job_title,
            "background": self.background,
            "recentNews": list(self.recent_news),
            "linkedInProfile": self.linked_in_profile,
            "source": self.source,
        }

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "PersonIntelligence":
        return cls.from_analysis(doc, source=_text(doc.get("source")))


@dataclass(slots=True)
class CompanyIntelligence:
    """What web research turned up about the company being met."""

    description: str = ""
    industry: str = ""
    size: Any = ""  # headcount text or a structured object from the model
    recent_news: List[str] = field(default_factory=list)
    website: str = ""
    source: str = COMPANY_SOURCE

    @classmethod
    def from_analysis(cls, analysis: Mapping[str, Any], source: str = COMPANY_SOURCE) -> "CompanyIntelligence":
        size = analysis.get("size")
        return cls(
            description=_text(analysis.get("description")),
            industry=_text(analysis.get("industry")),
            size="" if size is None else size,
            recent_news=_string_list(analysis.get("recentNews")),
            website=_text(analysis.get("website")),
            source=source,
        )

    @classmethod
    def unavailable(cls) -> "CompanyIntelligence":
        return cls(
            description=UNAVAILABLE,
            industry=UNKNOWN,
            size=UNKNOWN,
            recent_news=[],
            website="",
            source=ERROR_SOURCE,
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "industry": self.industry,
            "size": self.size,
            "recentNews": list(self.recent_news),
            "website": self.website,
            "source": self.source,
        }

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "CompanyIntelligence":
        return cls.from_analysis(doc, source=_text(doc.get("source")))


@dataclass(slots=True)
class MeetingPreparation:
    """Narrative summary plus ordered preparation tips."""

    summary: str
    tips: List[str] = field(default_factory=list)


@dataclass(slots=True)
class Report:
    """Persisted intelligence report for one calendar event."""

    event_id: str
    user_id: str
    event_details: EventDetails
    extracted_info: ExtractedEntities
    person_intelligence: PersonIntelligence
    company_intelligence: CompanyIntelligence
    generated_summary: str
    preparation_tips: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = field(default_factory=get_current_timestamp)
    last_updated: Optional[datetime] = field(default_factory=get_current_timestamp)
    id: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        """Return the MongoDB document; ``_id`` is left to the database."""
        return {
            "eventId": self.event_id,
            "userId": self.user_id,
            "eventDetails": self.event_details.to_document(),
            "extractedInfo": self.extracted_info.to_document(),
            "personIntelligence": self.person_intelligence.to_document(),
            "companyIntelligence": self.company_intelligence.to_document(),
            "generatedSummary": self.generated_summary,
            "preparationTips": list(self.preparation_tips),
            "createdAt": self.created_at,
            "lastUpdated": self.last_updated,
        }

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Report":
        return cls(
            id=str(doc["_id"]) if doc.get("_id") is not None else None,
            event_id=_text(doc.get("eventId")),
            user_id=_text(doc.get("userId")),
            event_details=EventDetails.from_document(doc.get("eventDetails") or {}),
            extracted_info=ExtractedEntities.from_document(doc.get("extractedInfo") or {}),
            person_intelligence=PersonIntelligence.from_document(doc.get("personIntelligence") or {}),
            company_intelligence=CompanyIntelligence.from_document(doc.get("companyIntelligence") or {}),
            generated_summary=_text(doc.get("generatedSummary")),
            preparation_tips=_string_list(doc.get("preparationTips")),
            created_at=parse_timestamp(doc.get("createdAt")),
            last_updated=parse_timestamp(doc.get("lastUpdated")),
        )


__all__ = [
    "ExtractedEntities",
    "EventDetails",
    "PersonIntelligence",
    "CompanyIntelligence",
    "MeetingPreparation",
    "Report",
    "PERSON_SOURCE",
    "COMPANY_SOURCE",
    "ERROR_SOURCE",
]
