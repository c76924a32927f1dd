"""Tests for the export encoder: filenames, saving and single-flight export."""

from __future__ import annotations

import asyncio
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

import pytest

from cognitive_report.domain.models import ReportDocument
from cognitive_report.exceptions import ReportExportError
from cognitive_report.export import encoder
from cognitive_report.export.encoder import (
    EXPORT_FAILED_MESSAGE,
    PdfBlob,
    SingleFlight,
    export_to_pdf,
    report_filename,
    sanitize_patient_name,
    save_blob,
)


class _StubFormatter:
    def __init__(self, data: bytes = b"%PDF-1.4 stub", fail: bool = False) -> None:
        self.data = data
        self.fail = fail
        self.calls = 0

    def format(self, document: ReportDocument, **kwargs: Any) -> bytes:
        self.calls += 1
        if self.fail:
            raise RuntimeError("reportlab exploded")
        return self.data

    def format_to_file(self, document: ReportDocument, path: Path, **kwargs: Any) -> Path:
        path.write_bytes(self.format(document))
        return path

    @property
    def content_type(self) -> str:
        return "application/pdf"


class TestFilenames:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("O'Brien  Jr.", "OBrien_Jr"),
            ("Margaret Ellis", "Margaret_Ellis"),
            ("  José-María  ", "JosMara"),
            ("", "Report"),
            ("   ", "Report"),
            (None, "Report"),
            ("N/A", "Report"),
            ("!!!", "Report"),
        ],
    )
    def test_sanitize(self, name, expected):
        assert sanitize_patient_name(name) == expected

    def test_report_filename(self):
        assert (
            report_filename("O'Brien  Jr.", date(2024, 3, 1))
            == "Cognitive_Assessment_Report_OBrien_Jr_2024-03-01.pdf"
        )

    def test_custom_prefix(self):
        assert report_filename("Ann Lee", date(2024, 3, 1), prefix="Clinic") == "Clinic_Ann_Lee_2024-03-01.pdf"

    def test_defaults_to_utc_date(self, monkeypatch):
        class _JustPastUtcMidnight(datetime):
            @classmethod
            def now(cls, tz=None):
                return datetime(2024, 3, 2, 0, 30, tzinfo=timezone.utc).astimezone(tz)

        monkeypatch.setattr(encoder, "datetime", _JustPastUtcMidnight)
        assert report_filename("Ann") == "Cognitive_Assessment_Report_Ann_2024-03-02.pdf"


class TestSaveBlob:
    def test_writes_into_directory(self, tmp_path):
        blob = PdfBlob(filename="r.pdf", data=b"%PDF-1.4")
        target = save_blob(blob, tmp_path / "out")
        assert target == tmp_path / "out" / "r.pdf"
        assert target.read_bytes() == b"%PDF-1.4"
        assert blob.size == 8

    def test_leaves_no_temp_files(self, tmp_path):
        save_blob(PdfBlob(filename="r.pdf", data=b"x"), tmp_path)
        assert [p.name for p in tmp_path.iterdir()] == ["r.pdf"]

    def test_overwrites_existing(self, tmp_path):
        (tmp_path / "r.pdf").write_bytes(b"old")
        save_blob(PdfBlob(filename="r.pdf", data=b"new"), tmp_path)
        assert (tmp_path / "r.pdf").read_bytes() == b"new"


class TestExportToPdf:
    @pytest.mark.asyncio
    async def test_returns_named_blob(self, document):
        formatter = _StubFormatter()
        blob = await export_to_pdf(document, formatter, on=date(2024, 3, 1))
        assert blob.filename == "Cognitive_Assessment_Report_Margaret_Ellis_2024-03-01.pdf"
        assert blob.data == formatter.data
        assert blob.content_type == "application/pdf"

    @pytest.mark.asyncio
    async def test_failure_is_wrapped(self, document):
        with pytest.raises(ReportExportError, match=EXPORT_FAILED_MESSAGE) as excinfo:
            await export_to_pdf(document, _StubFormatter(fail=True))
        assert isinstance(excinfo.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_default_formatter_renders_pdf(self, document):
        pytest.importorskip("reportlab")
        blob = await export_to_pdf(document, on=date(2024, 3, 1))
        assert blob.data[:5] == b"%PDF-"


class TestSingleFlight:
    @pytest.mark.asyncio
    async def test_overlapping_runs_produce_one_generation(self):
        guard: SingleFlight[str] = SingleFlight()
        release = asyncio.Event()
        started = 0

        async def generate() -> str:
            nonlocal started
            started += 1
            await release.wait()
            return "pdf"

        first = asyncio.create_task(guard.run(generate))
        await asyncio.sleep(0)
        assert guard.in_flight
        second = await guard.run(generate)
        release.set()

        assert await first == "pdf"
        assert second is None
        assert started == 1
        assert not guard.in_flight

    @pytest.mark.asyncio
    async def test_resets_after_failure(self):
        guard: SingleFlight[str] = SingleFlight()

        async def boom() -> str:
            raise RuntimeError("fail")

        with pytest.raises(RuntimeError):
            await guard.run(boom)
        assert not guard.in_flight

        async def ok() -> str:
            return "again"

        assert await guard.run(ok) == "again"

    @pytest.mark.asyncio
    async def test_two_exports_one_render(self, document):
        guard: SingleFlight[PdfBlob] = SingleFlight()
        formatter = _StubFormatter()
        results = await asyncio.gather(
            guard.run(lambda: export_to_pdf(document, formatter)),
            guard.run(lambda: export_to_pdf(document, formatter)),
        )
        assert sum(r is not None for r in results) == 1
        assert formatter.calls == 1
