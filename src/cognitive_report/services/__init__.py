"""Application services."""

from cognitive_report.services.report_session import ReportSession

__all__ = ["ReportSession"]
