"""Nested pydantic-settings configuration for the application.

Each sub-config reads its own ``COGREPORT_<GROUP>_*`` env vars::

    export COGREPORT_API_BASE_URL=https://portal.example.org/api
    export COGREPORT_PDF_PAGE_SIZE=letter
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class APIClientConfig(BaseSettings):
    """Portal REST API client configuration.

    Env vars use ``COGREPORT_API_`` prefix.  The base URL is also read from
    ``VITE_API_URL`` so the frontend's ``.env`` can be reused as-is.
    """

    model_config = {"env_prefix": "COGREPORT_API_", "populate_by_name": True}

    base_url: str = Field(
        default="http://localhost:3200/api",
        validation_alias=AliasChoices("COGREPORT_API_BASE_URL", "VITE_API_URL"),
    )
    timeout: float = Field(default=30.0, gt=0.0)
    auth_token: str = ""


class PDFFormattingConfig(BaseSettings):
    """PDF output formatting configuration.

    Env vars use ``COGREPORT_PDF_`` prefix::

        export COGREPORT_PDF_LOGO_PATH=/srv/assets/logo.png
        export COGREPORT_PDF_INCLUDE_CALL_APPENDIX=true
    """

    model_config = {"env_prefix": "COGREPORT_PDF_"}

    page_size: Literal["a4", "letter"] = "a4"
    margin_inches: float = Field(default=0.4, gt=0.0, le=3.0)
    header_height_inches: float = Field(default=1.0, gt=0.0, le=3.0)
    font_family: str = "Helvetica"
    body_font_size: int = Field(default=9, ge=6, le=72)
    heading_font_size: int = Field(default=12, ge=6, le=72)
    logo_path: Path | None = None
    brand_name: str = "CaringAI Listen"
    brand_short_name: str = "CaringAI"
    subtitle: str = "Cognitive Assessment Report"
    include_call_appendix: bool = False


class ContentConfig(BaseSettings):
    """Static clinical content configuration.

    Env vars use ``COGREPORT_CONTENT_`` prefix.  When ``path`` is unset the
    built-in English content table is used.
    """

    model_config = {"env_prefix": "COGREPORT_CONTENT_"}

    path: Path | None = None


class ExportConfig(BaseSettings):
    """Export configuration.

    Env vars use ``COGREPORT_EXPORT_`` prefix.
    """

    model_config = {"env_prefix": "COGREPORT_EXPORT_"}

    output_dir: Path = Path("./reports")
    filename_prefix: str = "Cognitive_Assessment_Report"


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``COGREPORT_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "COGREPORT_OBSERVABILITY_"}

    service_name: str = "cognitive-report"
    log_level: str = "INFO"


class APIConfig(BaseSettings):
    """FastAPI application metadata.

    Env vars use ``COGREPORT_APP_`` prefix.
    """

    model_config = {"env_prefix": "COGREPORT_APP_"}

    title: str = "Cognitive Report API"
    description: str = "Renders cognitive assessment reports as HTML previews and PDF downloads."
    port: int = 8080


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs.

    Each sub-config reads its own ``COGREPORT_<GROUP>_*`` env vars.
    """

    model_config = {"env_prefix": "COGREPORT_"}

    api_client: APIClientConfig = Field(default_factory=APIClientConfig)
    pdf: PDFFormattingConfig = Field(default_factory=PDFFormattingConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    app: APIConfig = Field(default_factory=APIConfig)
