"""Tests for the HTML preview formatter."""

from __future__ import annotations

from cognitive_report.core.config import PDFFormattingConfig
from cognitive_report.domain.sections import PAGE_COUNT, build_document
from cognitive_report.formatters.html_formatter import HTMLFormatter, rich


class TestRichFilter:
    def test_escapes_and_bolds(self):
        assert str(rich("<b> **x & y**")) == "&lt;b&gt; <strong>x &amp; y</strong>"

    def test_superscript_footnotes(self):
        assert str(rich("Minimal symptoms⁴")) == "Minimal symptoms<sup>4</sup>"


class TestHTMLFormatter:
    def test_renders_every_page(self, document):
        html = HTMLFormatter().render(document)
        for n in range(1, PAGE_COUNT + 1):
            assert f'id="page-{n}"' in html
            assert f"Page : {n}" in html
        assert 'id="page-15"' not in html

    def test_sections_are_open_details(self, document):
        html = HTMLFormatter().render(document)
        assert '<details class="section" id="patient_details" open>' in html
        assert html.count("<details") == sum(len(p.sections) for p in document.pages)

    def test_patient_values(self, document):
        html = HTMLFormatter().render(document)
        assert "Margaret Ellis" in html
        assert "65–74" in html
        assert "Mar 1, 2024" in html

    def test_score_classes(self, document):
        html = HTMLFormatter().render(document)
        assert 'class="question score-positive"' in html
        assert 'class="question score-alert"' in html
        assert 'class="question score-none"' in html

    def test_progress_bar_width(self, document):
        assert "width: 75.0%" in HTMLFormatter().render(document)

    def test_patient_name_is_escaped(self, raw_assessment, content, fixed_now):
        from cognitive_report.domain.normalizer import normalize

        raw_assessment["patientName"] = "<script>alert(1)</script>"
        html = HTMLFormatter().render(build_document(normalize(raw_assessment, now=fixed_now), content))
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_no_questions_shows_empty_state(self, view_model, content):
        html = HTMLFormatter().render(build_document(view_model, content, None))
        assert "No question data available" in html

    def test_error_banner_without_document(self):
        html = HTMLFormatter().render(None, error="Assessment not found")
        assert 'class="error-banner"' in html
        assert "Unable to load assessment." in html
        assert "Assessment not found" in html
        assert 'id="page-1"' not in html

    def test_no_banner_on_success(self, document):
        assert "error-banner\"" not in HTMLFormatter().render(document)

    def test_branding_from_config(self, document):
        config = PDFFormattingConfig(brand_name="Memory Clinic", subtitle="Screening Summary")
        html = HTMLFormatter(config).render(document)
        assert "Memory Clinic" in html
        assert "Screening Summary" in html

    def test_format_returns_utf8_bytes(self, document):
        data = HTMLFormatter().format(document)
        assert data.startswith(b"<!DOCTYPE html>")
        assert "65–74".encode("utf-8") in data

    def test_format_to_file(self, document, tmp_path):
        path = HTMLFormatter().format_to_file(document, tmp_path / "report.html")
        assert path.exists()
        assert "Patient Details" in path.read_text(encoding="utf-8")

    def test_content_type(self):
        assert HTMLFormatter().content_type.startswith("text/html")
