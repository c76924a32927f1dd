"""Export encoder: PDF serialization, download filenames and saving.

PDF rendering is CPU-bound reportlab work, so :func:`export_to_pdf` runs
it in a worker thread.  :class:`SingleFlight` keeps a second export from
starting while one is still in flight.
"""

from __future__ import annotations

import asyncio
import logging
import os
import re
import tempfile
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Awaitable, Callable, Generic, TypeVar

from cognitive_report.domain.models import NOT_AVAILABLE, ReportDocument
from cognitive_report.exceptions import ReportExportError
from cognitive_report.formatters.protocols import IOutputFormatter

log = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_FILENAME_PREFIX = "Cognitive_Assessment_Report"
FALLBACK_NAME = "Report"
EXPORT_FAILED_MESSAGE = "Failed to generate PDF. Please try again."

_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_]")


@dataclass(frozen=True)
class PdfBlob:
    """A rendered PDF ready for download."""

    filename: str
    data: bytes
    content_type: str = "application/pdf"

    @property
    def size(self) -> int:
        return len(self.data)


def sanitize_patient_name(name: str | None) -> str:
    """Filesystem-safe patient name: whitespace runs become ``_``, other symbols are dropped."""
    if not name:
        return FALLBACK_NAME
    cleaned = _UNSAFE_RE.sub("", _WHITESPACE_RE.sub("_", name.strip()))
    if not cleaned or name.strip() == NOT_AVAILABLE:
        return FALLBACK_NAME
    return cleaned


def report_filename(
    name: str | None,
    on: date | None = None,
    *,
    prefix: str = DEFAULT_FILENAME_PREFIX,
) -> str:
    """``Cognitive_Assessment_Report_<name>_<YYYY-MM-DD>.pdf`` for the export date *on*.

    *on* defaults to the current UTC date.
    """
    on = on or datetime.now(timezone.utc).date()
    return f"{prefix}_{sanitize_patient_name(name)}_{on.isoformat()}.pdf"


async def export_to_pdf(
    document: ReportDocument,
    formatter: IOutputFormatter | None = None,
    *,
    on: date | None = None,
    prefix: str = DEFAULT_FILENAME_PREFIX,
) -> PdfBlob:
    """Render *document* to a :class:`PdfBlob` off the event loop.

    Raises:
        ReportExportError: If rendering fails for any reason.
    """
    if formatter is None:
        from cognitive_report.formatters.pdf_formatter import PDFFormatter

        formatter = PDFFormatter()

    filename = report_filename(document.patient.name, on, prefix=prefix)
    try:
        data = await asyncio.to_thread(formatter.format, document)
    except Exception as exc:
        log.exception("PDF generation failed for assessment %s", document.patient.assessment_id)
        raise ReportExportError(EXPORT_FAILED_MESSAGE) from exc

    log.info("Generated %s (%d bytes)", filename, len(data))
    return PdfBlob(filename=filename, data=data, content_type=formatter.content_type)


def save_blob(blob: PdfBlob, directory: Path) -> Path:
    """Write *blob* into *directory* atomically and return the final path."""
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / blob.filename
    fd, tmp_name = tempfile.mkstemp(prefix=".export-", suffix=".tmp", dir=directory)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(blob.data)
        os.replace(tmp_path, target)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    log.info("Saved %s", target)
    return target


class SingleFlight(Generic[T]):
    """At most one run at a time; overlapping calls are refused, not queued."""

    def __init__(self) -> None:
        self._in_flight = False
        self._task: asyncio.Task[T] | None = None

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def run(self, factory: Callable[[], Awaitable[T]]) -> T | None:
        """Await ``factory()`` unless a run is pending, in which case return ``None``.

        *factory* is not called at all for a refused run.  The flag resets
        whether the run succeeds or raises.
        """
        if self._in_flight:
            log.debug("Export already in progress; ignoring request")
            return None
        self._in_flight = True
        try:
            self._task = asyncio.ensure_future(factory())
            return await self._task
        finally:
            self._in_flight = False
            self._task = None
