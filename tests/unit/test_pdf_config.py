"""Tests for PDFFormattingConfig and sibling config defaults and env overrides."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from cognitive_report.core.config import APIClientConfig, AppSettings, ExportConfig, PDFFormattingConfig


class TestPDFFormattingConfigDefaults:
    def test_page_size_default(self) -> None:
        cfg = PDFFormattingConfig()
        assert cfg.page_size == "a4"

    def test_margin_default(self) -> None:
        cfg = PDFFormattingConfig()
        assert cfg.margin_inches == 0.4

    def test_font_family_default(self) -> None:
        cfg = PDFFormattingConfig()
        assert cfg.font_family == "Helvetica"

    def test_font_size_defaults(self) -> None:
        cfg = PDFFormattingConfig()
        assert (cfg.body_font_size, cfg.heading_font_size) == (9, 12)

    def test_branding_defaults(self) -> None:
        cfg = PDFFormattingConfig()
        assert cfg.brand_name == "CaringAI Listen"
        assert cfg.subtitle == "Cognitive Assessment Report"
        assert cfg.logo_path is None

    def test_call_appendix_off_by_default(self) -> None:
        cfg = PDFFormattingConfig()
        assert cfg.include_call_appendix is False


class TestPDFFormattingConfigEnvOverrides:
    def test_page_size_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("COGREPORT_PDF_PAGE_SIZE", "letter")
        cfg = PDFFormattingConfig()
        assert cfg.page_size == "letter"

    def test_margin_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("COGREPORT_PDF_MARGIN_INCHES", "1.0")
        cfg = PDFFormattingConfig()
        assert cfg.margin_inches == 1.0

    def test_call_appendix_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("COGREPORT_PDF_INCLUDE_CALL_APPENDIX", "true")
        cfg = PDFFormattingConfig()
        assert cfg.include_call_appendix is True

    def test_rejects_unknown_page_size(self, monkeypatch) -> None:
        monkeypatch.setenv("COGREPORT_PDF_PAGE_SIZE", "tabloid")
        with pytest.raises(ValidationError):
            PDFFormattingConfig()


class TestAPIClientConfig:
    def test_default_base_url(self, monkeypatch) -> None:
        monkeypatch.delenv("COGREPORT_API_BASE_URL", raising=False)
        monkeypatch.delenv("VITE_API_URL", raising=False)
        assert APIClientConfig().base_url == "http://localhost:3200/api"

    def test_base_url_from_prefixed_env(self, monkeypatch) -> None:
        monkeypatch.setenv("COGREPORT_API_BASE_URL", "https://portal.example.org/api")
        assert APIClientConfig().base_url == "https://portal.example.org/api"

    def test_base_url_from_frontend_env(self, monkeypatch) -> None:
        monkeypatch.delenv("COGREPORT_API_BASE_URL", raising=False)
        monkeypatch.setenv("VITE_API_URL", "https://frontend.example.org/api")
        assert APIClientConfig().base_url == "https://frontend.example.org/api"

    def test_timeout_must_be_positive(self, monkeypatch) -> None:
        monkeypatch.setenv("COGREPORT_API_TIMEOUT", "0")
        with pytest.raises(ValidationError):
            APIClientConfig()


class TestAppSettings:
    def test_nested_groups(self) -> None:
        settings = AppSettings()
        assert isinstance(settings.pdf, PDFFormattingConfig)
        assert isinstance(settings.export, ExportConfig)
        assert settings.export.filename_prefix == "Cognitive_Assessment_Report"

    def test_export_dir_from_env(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("COGREPORT_EXPORT_OUTPUT_DIR", str(tmp_path))
        assert AppSettings().export.output_dir == Path(tmp_path)
