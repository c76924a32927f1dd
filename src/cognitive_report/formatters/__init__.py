"""Output formatters for rendering a ReportDocument to various formats.

Usage::

    from cognitive_report.formatters import HTMLFormatter, PDFFormatter

    pdf_bytes = PDFFormatter().format(document)
    html_bytes = HTMLFormatter().format(document)
"""

from __future__ import annotations

from typing import Any

from cognitive_report.formatters.html_formatter import HTMLFormatter
from cognitive_report.formatters.json_formatter import JSONFormatter
from cognitive_report.formatters.protocols import IOutputFormatter

__all__ = [
    "HTMLFormatter",
    "IOutputFormatter",
    "JSONFormatter",
    "PDFFormatter",
]


def __getattr__(name: str) -> Any:
    """Lazy-load PDFFormatter so reportlab is only imported when needed."""
    if name == "PDFFormatter":
        from cognitive_report.formatters.pdf_formatter import PDFFormatter

        return PDFFormatter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
