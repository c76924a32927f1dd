"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlparse

if TYPE_CHECKING:
    from cognitive_report.core.config import AppSettings

log = logging.getLogger(__name__)


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_api_base_url(settings)
    _check_logo(settings)
    _check_content(settings)


def _check_api_base_url(settings: AppSettings) -> None:
    """Reject base URLs the HTTP client cannot use."""
    parsed = urlparse(settings.api_client.base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(
            f"COGREPORT_API_BASE_URL must be an absolute http(s) URL, got {settings.api_client.base_url!r}."
        )


def _check_logo(settings: AppSettings) -> None:
    """A configured logo must exist; reports fall back to brand text only when unset."""
    logo = settings.pdf.logo_path
    if logo is not None and not logo.is_file():
        raise ValueError(f"COGREPORT_PDF_LOGO_PATH points to a missing file: {logo}")


def _check_content(settings: AppSettings) -> None:
    """A configured content override must exist."""
    path = settings.content.path
    if path is None:
        log.info("Using built-in clinical content table")
        return
    if not path.is_file():
        raise ValueError(f"COGREPORT_CONTENT_PATH points to a missing file: {path}")
