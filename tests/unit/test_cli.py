"""Tests for the typer CLI."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest
from typer.testing import CliRunner

from cognitive_report.cli import main as cli_main
from cognitive_report.cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    monkeypatch.setattr(cli_main, "setup_logging", lambda config: None)


@pytest.fixture
def record_file(tmp_path, raw_assessment):
    path = tmp_path / "record.json"
    path.write_text(json.dumps({"success": True, "data": raw_assessment}), encoding="utf-8")
    return path


@pytest.fixture
def questions_file(tmp_path, raw_questions):
    path = tmp_path / "questions.json"
    path.write_text(json.dumps(raw_questions), encoding="utf-8")
    return path


class TestRenderFile:
    def test_html_output(self, tmp_path, record_file, questions_file):
        out = tmp_path / "out"
        result = runner.invoke(
            app,
            ["render-file", str(record_file), "-q", str(questions_file), "-f", "html", "-o", str(out)],
        )
        assert result.exit_code == 0, result.output
        expected = out / f"Cognitive_Assessment_Report_Margaret_Ellis_{datetime.now(timezone.utc).date().isoformat()}.html"
        assert expected.exists()
        html = expected.read_text(encoding="utf-8")
        assert "Margaret Ellis" in html
        assert "score-alert" in html
        assert "Margaret Ellis" in result.output

    def test_pdf_output(self, tmp_path, record_file):
        pytest.importorskip("reportlab")
        out = tmp_path / "out"
        result = runner.invoke(app, ["render-file", str(record_file), "-o", str(out)])
        assert result.exit_code == 0, result.output
        pdfs = list(out.glob("*.pdf"))
        assert len(pdfs) == 1
        assert pdfs[0].read_bytes()[:5] == b"%PDF-"

    def test_bare_record_is_accepted(self, tmp_path, raw_assessment):
        record = tmp_path / "bare.json"
        record.write_text(json.dumps(raw_assessment), encoding="utf-8")
        result = runner.invoke(app, ["render-file", str(record), "-f", "html", "-o", str(tmp_path / "out")])
        assert result.exit_code == 0, result.output
        assert list((tmp_path / "out").glob("*.html"))

    def test_unreadable_record(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{", encoding="utf-8")
        result = runner.invoke(app, ["render-file", str(bad), "-f", "html", "-o", str(tmp_path)])
        assert result.exit_code != 0


class TestContentTemplate:
    def test_prints_json(self):
        result = runner.invoke(app, ["content-template"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["version"] == "2024.10-en"

    def test_writes_file(self, tmp_path):
        target = tmp_path / "content.json"
        result = runner.invoke(app, ["content-template", "--output", str(target)])
        assert result.exit_code == 0
        assert json.loads(target.read_text(encoding="utf-8"))["locale"] == "en-US"


class TestSettingsValidation:
    def test_bad_base_url_fails_fast(self, tmp_path, record_file, monkeypatch):
        monkeypatch.setenv("COGREPORT_API_BASE_URL", "not-a-url")
        result = runner.invoke(app, ["render-file", str(record_file), "-f", "html", "-o", str(tmp_path)])
        assert result.exit_code != 0
        assert isinstance(result.exception, ValueError)
