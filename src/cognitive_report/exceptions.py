"""Exception hierarchy for cognitive-report."""


class CognitiveReportError(Exception):
    """Base exception for all cognitive-report errors."""


class AssessmentUnavailableError(CognitiveReportError):
    """Raised when the assessment record cannot be fetched from the portal API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ReportDataError(CognitiveReportError, ValueError):
    """Raised when reference data violates a model invariant (e.g. raw > max)."""


class ContentLoadError(CognitiveReportError):
    """Raised when a static content override file cannot be loaded."""


class ReportExportError(CognitiveReportError):
    """Raised when PDF serialization fails."""
