import unittest
from datetime import datetime, timezone
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from meeting_intel.models import EventDetails, PersonIntelligence, Report
from meeting_intel.utils import parse_timestamp


class TestEventDetails(unittest.TestCase):

    def test_from_calendar_event(self):
        event = {
            "id": "abc123",
            "summary": "Intro call",
            "description": "Jane Doe - Acme Corp",
            "start": {"dateTime": "2026-10-20T09:00:00-04:00"},
            "end": {"dateTime": "2026-10-20T09:30:00-04:00"},
            "attendees": [{"email": "jane@acme.example"}, {"displayName": "Bob"}, {}],
        }

        details = EventDetails.from_calendar_event(event)

        self.assertEqual(details.title, "Intro call")
        self.assertEqual(details.description, "Jane Doe - Acme Corp")
        self.assertEqual(details.start_time, datetime(2026, 10, 20, 13, 0, tzinfo=timezone.utc))
        self.assertEqual(details.attendees, ["jane@acme.example", "Bob"])

    def test_all_day_event(self):
        details = EventDetails.from_calendar_event({"start": {"date": "2026-10-21"}, "end": {"date": "2026-10-22"}})

        self.assertEqual(details.start_time, datetime(2026, 10, 21, tzinfo=timezone.utc))
        self.assertEqual(details.title, "")
        self.assertEqual(details.attendees, [])

    def test_from_mapping_with_bad_times(self):
        details = EventDetails.from_mapping({"title": "Sync", "startTime": "tomorrow-ish"})

        self.assertIsNone(details.start_time)
        self.assertIsNone(details.end_time)
        self.assertEqual(details.description, "")


class TestReport(unittest.TestCase):

    def test_from_document_keeps_missing_timestamps_empty(self):
        report = Report.from_document({
            "_id": "abc",
            "eventId": "evt-1",
            "userId": "user-a",
            "generatedSummary": "Summary",
        })

        self.assertIsNone(report.created_at)
        self.assertIsNone(report.last_updated)
        self.assertEqual(report.id, "abc")


class TestPersonIntelligence(unittest.TestCase):

    def test_from_analysis_fills_missing_fields(self):
        person = PersonIntelligence.from_analysis({"jobTitle": "CTO", "recentNews": "Raised a round"})

        self.assertEqual(person.job_title, "CTO")
        self.assertEqual(person.background, "")
        self.assertEqual(person.recent_news, ["Raised a round"])
        self.assertEqual(person.linked_in_profile, "")


class TestParseTimestamp(unittest.TestCase):

    def test_truncates_to_milliseconds(self):
        value = parse_timestamp(datetime(2026, 1, 1, 12, 0, 0, 123456, tzinfo=timezone.utc))
        self.assertEqual(value.microsecond, 123000)

    def test_naive_treated_as_utc(self):
        self.assertEqual(parse_timestamp("2026-01-01T12:00:00").tzinfo, timezone.utc)


if __name__ == '__main__':
    unittest.main()
