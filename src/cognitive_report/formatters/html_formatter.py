"""HTML preview formatter using jinja2.

Renders the same section tree as the PDF formatter into a single scrollable
page.  Every section is a collapsible ``<details open>`` block.  An
``error`` keyword renders the inline error banner instead of (or above) the
report body, which is how the preview reports an unavailable assessment.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup, escape

from cognitive_report.core.config import PDFFormattingConfig
from cognitive_report.domain.models import ReportDocument
from cognitive_report.domain.normalizer import ordinal
from cognitive_report.formatters import pdf_styles
from cognitive_report.formatters.primitives import column_alignment, inline_markup, progress_geometry

_SUPERSCRIPT_DIGITS = str.maketrans("⁰¹²³⁴⁵⁶⁷⁸⁹", "0123456789")
_SUPERSCRIPT_RE = re.compile("[⁰¹²³⁴⁵⁶⁷⁸⁹]+")


def rich(text: str) -> Markup:
    """Escape *text*, render ``**bold**`` spans and footnote markers as HTML."""
    parts: list[str] = []
    for segment, bold in inline_markup(str(text)):
        html = str(escape(segment))
        html = _SUPERSCRIPT_RE.sub(lambda m: f"<sup>{m.group(0).translate(_SUPERSCRIPT_DIGITS)}</sup>", html)
        parts.append(f"<strong>{html}</strong>" if bold else html)
    return Markup("".join(parts))


def _build_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("cognitive_report.formatters", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["rich"] = rich
    env.filters["ordinal"] = ordinal
    env.globals["progress_geometry"] = progress_geometry
    env.globals["column_alignment"] = column_alignment
    env.globals["styles"] = pdf_styles
    return env


class HTMLFormatter:
    """Renders a ``ReportDocument`` as a standalone HTML preview page."""

    def __init__(self, config: PDFFormattingConfig | None = None) -> None:
        self._config = config or PDFFormattingConfig()
        self._env = _build_environment()

    def format(self, document: ReportDocument | None, **kwargs: Any) -> bytes:
        """Render *document* to UTF-8 HTML.

        Keyword Args:
            error: Optional message shown in the error banner.  With no
                document only the banner is rendered.
        """
        return self.render(document, error=kwargs.get("error")).encode("utf-8")

    def render(self, document: ReportDocument | None, *, error: str | None = None) -> str:
        template = self._env.get_template("report.html")
        return template.render(
            document=document,
            error=error,
            brand_name=self._config.brand_name,
            brand_short_name=self._config.brand_short_name,
            subtitle=self._config.subtitle,
            score_classes=pdf_styles.SCORE_STYLE_CSS_CLASSES,
            score_styles=pdf_styles.SCORE_STYLES,
            domain_colors=pdf_styles.DOMAIN_STATUS_COLORS,
        )

    def format_to_file(self, document: ReportDocument, path: Path, **kwargs: Any) -> Path:
        """Write HTML to *path* and return it."""
        path.write_bytes(self.format(document, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "text/html; charset=utf-8"
