"""Report session: one assessment's load state, preview and export.

Holds what the report page holds in the browser: a loading flag, the last
load error, the raw assessment and its question data.  Load failures are
recorded on the session, never raised, so a preview can always render (with
an error banner if need be).
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from cognitive_report.clients.assessment_client import AssessmentClient
from cognitive_report.core.config import ExportConfig, PDFFormattingConfig
from cognitive_report.core.types import JsonDict
from cognitive_report.domain.content import StaticContent
from cognitive_report.domain.models import ReportDocument
from cognitive_report.domain.normalizer import normalize, normalize_questions
from cognitive_report.domain.sections import build_document
from cognitive_report.exceptions import AssessmentUnavailableError
from cognitive_report.export.encoder import PdfBlob, SingleFlight, export_to_pdf
from cognitive_report.formatters.html_formatter import HTMLFormatter
from cognitive_report.formatters.protocols import IOutputFormatter

log = logging.getLogger(__name__)


class ReportSession:
    """Loads one assessment and renders it on demand."""

    def __init__(
        self,
        client: AssessmentClient,
        content: StaticContent,
        pdf_config: PDFFormattingConfig | None = None,
        *,
        export_config: ExportConfig | None = None,
        pdf_formatter: IOutputFormatter | None = None,
    ) -> None:
        self._client = client
        self._content = content
        self._pdf_config = pdf_config or PDFFormattingConfig()
        self._export_config = export_config or ExportConfig()
        self._pdf_formatter = pdf_formatter
        self._html = HTMLFormatter(self._pdf_config)
        self._guard: SingleFlight[PdfBlob] = SingleFlight()

        self.assessment_id: str | None = None
        self.loading = False
        self.error: str | None = None
        self.assessment: JsonDict | None = None
        self.questions: Any = None

    # ── Loading ──────────────────────────────────────────────────────

    async def load(self, assessment_id: str) -> None:
        """Fetch the assessment, then its call questions when a call id exists.

        An assessment failure is stored in :attr:`error`.  A questions
        failure is only logged; the report renders without question cards.
        """
        self.assessment_id = assessment_id
        self.loading = True
        self.error = None
        self.assessment = None
        self.questions = None
        try:
            self.assessment = await self._client.get_assessment(assessment_id)
        except AssessmentUnavailableError as exc:
            log.warning("Assessment %s unavailable: %s", assessment_id, exc)
            self.error = str(exc) or "Failed to fetch assessment data"
            return
        finally:
            self.loading = False

        call_id = _call_id(self.assessment)
        if not call_id:
            log.debug("Assessment %s has no call id; skipping questions", assessment_id)
            return
        try:
            self.questions = await self._client.get_questions(call_id)
        except AssessmentUnavailableError as exc:
            log.warning("Questions for call %s unavailable: %s", call_id, exc)

    # ── Rendering ────────────────────────────────────────────────────

    @property
    def export_enabled(self) -> bool:
        return not self.loading and self.error is None and self.assessment is not None

    @property
    def export_in_flight(self) -> bool:
        return self._guard.in_flight

    def document(self, now: datetime | None = None) -> ReportDocument:
        """Build the report tree from the loaded data.

        Raises:
            AssessmentUnavailableError: If nothing has been loaded successfully.
        """
        if self.assessment is None:
            raise AssessmentUnavailableError(self.error or "Assessment has not been loaded")
        view_model = normalize(self.assessment, now=now)
        questions = normalize_questions(self.questions) if self.questions is not None else None
        return build_document(
            view_model,
            self._content,
            questions,
            include_appendix=self._pdf_config.include_call_appendix,
        )

    async def export_pdf(self, now: datetime | None = None) -> PdfBlob | None:
        """Render the PDF, or return ``None`` when export is disabled or already running.

        Raises:
            ReportExportError: If PDF rendering fails.
        """
        if not self.export_enabled:
            log.info("Export refused for %s: report not ready", self.assessment_id)
            return None
        document = self.document(now)
        on = now.date() if now else None
        formatter = self._pdf_formatter or self._default_pdf_formatter()
        return await self._guard.run(
            lambda: export_to_pdf(
                document,
                formatter,
                on=on,
                prefix=self._export_config.filename_prefix,
            )
        )

    def _default_pdf_formatter(self) -> IOutputFormatter:
        from cognitive_report.formatters.pdf_formatter import PDFFormatter

        return PDFFormatter(self._pdf_config)

    def preview_html(self, now: datetime | None = None) -> str:
        """The scrollable HTML preview, or an error banner when loading failed."""
        if self.error is not None or self.assessment is None:
            return self._html.render(None, error=self.error or "Assessment has not been loaded")
        return self._html.render(self.document(now))


def _call_id(assessment: JsonDict) -> str | None:
    batch = assessment.get("retellBatchCallData")
    if isinstance(batch, dict) and batch.get("batch_call_id"):
        return str(batch["batch_call_id"])
    return None
