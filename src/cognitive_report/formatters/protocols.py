"""Output formatter protocol: defines the contract all formatters implement."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from cognitive_report.domain.models import ReportDocument


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for report formatters (PDF, HTML, JSON).

    Every implementation renders the same ``ReportDocument`` section tree.
    """

    def format(self, document: ReportDocument, **kwargs: Any) -> bytes:
        """Render the document into output bytes."""
        ...

    def format_to_file(self, document: ReportDocument, path: Path, **kwargs: Any) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format (e.g. 'application/pdf')."""
        ...


__all__ = ["IOutputFormatter"]
