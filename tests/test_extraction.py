import time
import unittest
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from meeting_intel.models import ExtractedEntities
from meeting_intel.services.extraction import extract_person_and_company, filter_relevant_events


class TestExtractPersonAndCompany(unittest.TestCase):

    def test_simple_pair(self):
        result = extract_person_and_company("Jane Doe - Acme Corp")
        self.assertEqual(result, ExtractedEntities(person_name="Jane Doe", company_name="Acme Corp"))

    def test_no_spaces_around_hyphen(self):
        result = extract_person_and_company("Jane Doe-Acme Corp")
        self.assertEqual(result.person_name, "Jane Doe")
        self.assertEqual(result.company_name, "Acme Corp")

    def test_three_name_tokens(self):
        result = extract_person_and_company("Mary Ann Smith - Globex")
        self.assertEqual(result.person_name, "Mary Ann Smith")
        self.assertEqual(result.company_name, "Globex")

    def test_unicode_letters(self):
        result = extract_person_and_company("José Müller - Société Générale")
        self.assertEqual(result.person_name, "José Müller")
        self.assertEqual(result.company_name, "Société Générale")

    def test_company_punctuation_and_digits(self):
        result = extract_person_and_company("Tom Baker - Smith & Sons, Inc. 2024")
        self.assertEqual(result.company_name, "Smith & Sons, Inc. 2024")

    def test_company_stops_at_unsupported_character(self):
        result = extract_person_and_company("Jane Doe - Acme Corp (intro call)")
        self.assertEqual(result.company_name, "Acme Corp")

    def test_surrounding_whitespace_trimmed(self):
        result = extract_person_and_company("   Jane   Doe   -   Acme Corp   ")
        self.assertEqual(result.person_name, "Jane   Doe")
        self.assertEqual(result.company_name, "Acme Corp")

    def test_first_match_only(self):
        result = extract_person_and_company("Jane Doe - Acme; John Roe - Initech")
        self.assertEqual(result.person_name, "Jane Doe")
        self.assertEqual(result.company_name, "Acme")

    def test_no_hyphen(self):
        self.assertIsNone(extract_person_and_company("Weekly sync"))

    def test_single_name_token(self):
        self.assertIsNone(extract_person_and_company("Jane - Acme"))

    def test_empty_or_missing(self):
        self.assertIsNone(extract_person_and_company(""))
        self.assertIsNone(extract_person_and_company(None))

    def test_digits_in_person_name_rejected(self):
        self.assertIsNone(extract_person_and_company("R2 D2 - Rebels"))

    def test_whitespace_only_company_is_no_match(self):
        self.assertIsNone(extract_person_and_company("Jane Doe -   "))

    def test_whitespace_only_company_skips_to_next_pair(self):
        result = extract_person_and_company("Jane Doe - \n(tbc) John Roe - Initech")
        self.assertEqual(result, ExtractedEntities(person_name="John Roe", company_name="Initech"))

    def test_name_glued_to_digits_uses_letters_only(self):
        result = extract_person_and_company("ref42Jane Doe - Acme")
        self.assertEqual(result.person_name, "Jane Doe")

    def test_long_description_without_match_is_fast(self):
        descriptions = [
            "word " * 4000 + "1-",
            "word " * 4000 + "-",
            ("word " * 200 + "1- ") * 50,
        ]
        for description in descriptions:
            started = time.perf_counter()
            self.assertIsNone(extract_person_and_company(description))
            self.assertLess(time.perf_counter() - started, 1.0)

    def test_long_description_with_late_match(self):
        description = "1- " * 5000 + "Jane Doe - Acme Corp"
        started = time.perf_counter()
        result = extract_person_and_company(description)
        self.assertLess(time.perf_counter() - started, 1.0)
        self.assertEqual(result.company_name, "Acme Corp")


class TestFilterRelevantEvents(unittest.TestCase):

    def test_keeps_only_matching_events(self):
        events = [
            {"id": "1", "summary": "Intro", "description": "Jane Doe - Acme Corp"},
            {"id": "2", "summary": "Standup", "description": "Weekly sync"},
            {"id": "3", "summary": "Lunch"},
        ]
        relevant = filter_relevant_events(events)
        self.assertEqual([e["id"] for e in relevant], ["1"])


if __name__ == '__main__':
    unittest.main()
