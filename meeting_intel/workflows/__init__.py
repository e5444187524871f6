"""Pipelines composing the service layer."""

from .report_pipeline import ReportService, create_report_service  # noqa: F401

__all__ = ["ReportService", "create_report_service"]
