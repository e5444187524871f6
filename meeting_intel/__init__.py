"""Top-level package for the meeting-intel project.

This package exposes the report service so callers can do
`from meeting_intel import create_report_service` and then
`service.get_or_generate(event_id, user_id, event_data)`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version(__name__)
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .exceptions import UnresolvableEventError  # convenience re-export
from .workflows.report_pipeline import ReportService, create_report_service  # convenience re-export

__all__ = ["ReportService", "create_report_service", "UnresolvableEventError", "__version__"]
