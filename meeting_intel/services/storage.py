"""Persistence layer: MongoDB storage of generated reports.

``eventId`` carries a unique index while lookups are scoped by
``(userId, eventId)``. A duplicate-key error on insert therefore means
another request created the report for this event first; the winner is
re-read and returned instead of surfacing the error.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from ..models import Report

logger = logging.getLogger(__name__)


def _to_object_id(report_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(report_id)
    except (InvalidId, TypeError):
        return None


class ReportStore:
    """Report CRUD on top of a :class:`pymongo.collection.Collection`."""

    def __init__(self, collection: Collection):
        self._collection = collection

    def ensure_indexes(self) -> None:
        """Create the indexes the store relies on (idempotent)."""
        self._collection.create_index([("eventId", ASCENDING)], unique=True)
        self._collection.create_index([("userId", ASCENDING), ("eventId", ASCENDING)])
        self._collection.create_index([("createdAt", ASCENDING)])
        logger.info("Ensured indexes on reports collection")

    def find(self, user_id: str, event_id: str) -> Optional[Report]:
        doc = self._collection.find_one({"userId": user_id, "eventId": event_id})
        return Report.from_document(doc) if doc else None

    def find_by_event_id(self, event_id: str) -> Optional[Report]:
        doc = self._collection.find_one({"eventId": event_id})
        return Report.from_document(doc) if doc else None

    def insert(self, report: Report) -> Report:
        """Persist *report*, or return the report another caller stored first."""
        try:
            result = self._collection.insert_one(report.to_document())
        except DuplicateKeyError:
            logger.warning(
                "Report for event %s already exists – re-reading stored report",
                report.event_id,
            )
            existing = self.find_by_event_id(report.event_id)
            if existing is None:
                # The winning report was deleted again before we could read it.
                raise
            return existing

        report.id = str(result.inserted_id)
        logger.info("Stored report to MongoDB with _id=%s", report.id)
        return report

    def list_by_user(self, user_id: str) -> List[Report]:
        """Return every report owned by *user_id*, newest first."""
        cursor = self._collection.find({"userId": user_id}).sort("createdAt", DESCENDING)
        return [Report.from_document(doc) for doc in cursor]

    def delete_one(self, report_id: str, user_id: str) -> bool:
        """Delete one report owned by *user_id*; ``False`` if nothing matched."""
        object_id = _to_object_id(report_id)
        if object_id is None:
            logger.info("Ignoring delete for malformed report id %r", report_id)
            return False

        result = self._collection.delete_one({"_id": object_id, "userId": user_id})
        return result.deleted_count == 1

    def clear_all(self, user_id: str) -> int:
        """Delete every report owned by *user_id* and return how many went."""
        result = self._collection.delete_many({"userId": user_id})
        logger.info("Cleared %d reports for user %s", result.deleted_count, user_id)
        return result.deleted_count


__all__ = ["ReportStore"]
