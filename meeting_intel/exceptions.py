"""Errors that cross the report-generation boundary."""

from __future__ import annotations


class MeetingIntelError(Exception):
    """Base class for errors raised by meeting_intel."""


class UnresolvableEventError(MeetingIntelError, ValueError):
    """The event description holds no ``Person Name - Company`` pair.

    No report is generated or cached, so a retry after the description has
    been corrected can still succeed.
    """

    def __init__(self, description: str | None):
        self.description = description
        super().__init__(
            "Unable to extract person and company information from event description"
        )


__all__ = ["MeetingIntelError", "UnresolvableEventError"]
