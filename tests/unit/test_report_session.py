"""Tests for ReportSession load, preview and export behaviour."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import pytest

from cognitive_report.core.config import PDFFormattingConfig
from cognitive_report.domain.models import ReportDocument
from cognitive_report.exceptions import AssessmentUnavailableError, ReportExportError
from cognitive_report.services.report_session import ReportSession


class _CountingFormatter:
    """Counts render calls so overlapping exports can be observed."""

    def __init__(self, fail: bool = False) -> None:
        self.calls = 0
        self.fail = fail

    def format(self, document: ReportDocument, **kwargs: Any) -> bytes:
        self.calls += 1
        if self.fail:
            raise RuntimeError("render failed")
        return b"%PDF-1.4 fake"

    def format_to_file(self, document: ReportDocument, path: Path, **kwargs: Any) -> Path:
        path.write_bytes(self.format(document))
        return path

    @property
    def content_type(self) -> str:
        return "application/pdf"


class TestLoad:
    @pytest.mark.asyncio
    async def test_loads_assessment_and_questions(self, fake_client, content):
        session = ReportSession(fake_client, content)
        await session.load("a1")
        assert session.error is None
        assert not session.loading
        assert session.assessment["patientName"] == "Margaret Ellis"
        assert session.questions is not None
        assert fake_client.calls == [("assessment", "a1"), ("questions", "call_8f2e")]

    @pytest.mark.asyncio
    async def test_assessment_failure_is_recorded(self, client_factory, content):
        client = client_factory(assessment_error="Assessment not found")
        session = ReportSession(client, content)
        await session.load("missing")
        assert session.error == "Assessment not found"
        assert session.assessment is None
        assert not session.loading
        assert not session.export_enabled
        assert client.calls == [("assessment", "missing")]

    @pytest.mark.asyncio
    async def test_questions_failure_is_not_fatal(self, client_factory, raw_assessment, content, fixed_now):
        session = ReportSession(client_factory(raw_assessment, questions_error="boom"), content)
        await session.load("a1")
        assert session.error is None
        assert session.questions is None
        cards = session.document(fixed_now).page(11).sections[1].blocks[0]
        assert cards.cards == ()

    @pytest.mark.asyncio
    async def test_no_call_id_skips_questions(self, client_factory, raw_assessment, content):
        del raw_assessment["retellBatchCallData"]
        client = client_factory(raw_assessment)
        await ReportSession(client, content).load("a1")
        assert client.calls == [("assessment", "a1")]

    @pytest.mark.asyncio
    async def test_reload_clears_previous_error(self, client_factory, raw_assessment, content):
        client = client_factory(assessment_error="nope")
        session = ReportSession(client, content)
        await session.load("a1")
        assert session.error
        client._assessment_error = None
        client._assessment = raw_assessment
        await session.load("a1")
        assert session.error is None
        assert session.export_enabled


class TestDocument:
    def test_requires_loaded_assessment(self, fake_client, content):
        with pytest.raises(AssessmentUnavailableError):
            ReportSession(fake_client, content).document()

    @pytest.mark.asyncio
    async def test_builds_fourteen_pages(self, fake_client, content, fixed_now):
        session = ReportSession(fake_client, content)
        await session.load("a1")
        document = session.document(fixed_now)
        assert len(document.pages) == 14
        assert document.appendix == ()
        assert document.patient.age_group == "65–74"

    @pytest.mark.asyncio
    async def test_appendix_follows_config(self, fake_client, content, fixed_now):
        session = ReportSession(fake_client, content, PDFFormattingConfig(include_call_appendix=True))
        await session.load("a1")
        assert len(session.document(fixed_now).appendix) == 2


class TestPreview:
    @pytest.mark.asyncio
    async def test_preview_renders_report(self, fake_client, content, fixed_now):
        session = ReportSession(fake_client, content)
        await session.load("a1")
        html = session.preview_html(fixed_now)
        assert "Margaret Ellis" in html
        assert 'class="error-banner"' not in html

    @pytest.mark.asyncio
    async def test_preview_shows_banner_on_failure(self, client_factory, content):
        session = ReportSession(client_factory(assessment_error="Assessment not found"), content)
        await session.load("missing")
        html = session.preview_html()
        assert 'class="error-banner"' in html
        assert "Assessment not found" in html

    def test_preview_before_load(self, fake_client, content):
        assert "Assessment has not been loaded" in ReportSession(fake_client, content).preview_html()


class TestExport:
    @pytest.mark.asyncio
    async def test_export_disabled_before_load(self, fake_client, content):
        formatter = _CountingFormatter()
        session = ReportSession(fake_client, content, pdf_formatter=formatter)
        assert await session.export_pdf() is None
        assert formatter.calls == 0

    @pytest.mark.asyncio
    async def test_export_names_file_by_patient_and_date(self, fake_client, content, fixed_now):
        session = ReportSession(fake_client, content, pdf_formatter=_CountingFormatter())
        await session.load("a1")
        blob = await session.export_pdf(fixed_now)
        assert blob is not None
        assert blob.filename == "Cognitive_Assessment_Report_Margaret_Ellis_2024-03-01.pdf"

    @pytest.mark.asyncio
    async def test_overlapping_exports_render_once(self, fake_client, content, fixed_now):
        formatter = _CountingFormatter()
        session = ReportSession(fake_client, content, pdf_formatter=formatter)
        await session.load("a1")
        first, second = await asyncio.gather(session.export_pdf(fixed_now), session.export_pdf(fixed_now))
        assert (first is None) != (second is None)
        assert formatter.calls == 1
        assert not session.export_in_flight

    @pytest.mark.asyncio
    async def test_export_failure_resets_guard(self, fake_client, content):
        session = ReportSession(fake_client, content, pdf_formatter=_CountingFormatter(fail=True))
        await session.load("a1")
        with pytest.raises(ReportExportError, match="Failed to generate PDF"):
            await session.export_pdf()
        assert not session.export_in_flight
