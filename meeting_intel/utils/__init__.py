"""Utility functions for the meeting_intel project.

Re-exports the text-cleaning helpers and datetime utilities so that imports like
`from ..utils import parse_json_object` or `from ..utils import get_current_timestamp`
work as expected.
"""

from .text_cleaning import strip_code_fences  # noqa: F401
from .datetime_utils import get_current_timestamp, parse_timestamp, to_storage_precision  # noqa: F401
from .llm_parsing import parse_json_object  # noqa: F401

__all__ = [
    "strip_code_fences",
    "get_current_timestamp",
    "parse_timestamp",
    "to_storage_precision",
    "parse_json_object",
]
