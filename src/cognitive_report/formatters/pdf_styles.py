"""Centralized style constants for report output (PDF and HTML)."""

from __future__ import annotations

from cognitive_report.domain.models import DomainStatus, ScoreStyle

# ── Section chrome (hex strings) ─────────────────────────────────────
# Kept as plain hex so the PDF formatter can wrap them in reportlab
# HexColor and the HTML template can use them verbatim.

SECTION_HEADER_BG = "#334155"
SECTION_HEADER_TEXT = "#FFFFFF"
SECTION_BODY_BG = "#F9FAFB"
SECTION_BORDER_COLOR = "#E2E8F0"
CARD_BG = "#FFFFFF"
TEXT_COLOR = "#1F2937"
MUTED_TEXT_COLOR = "#4B5563"
DIVIDER_COLOR = "#CBD5E1"

# ── Tables ───────────────────────────────────────────────────────────

TABLE_HEADER_BG = "#334155"
TABLE_HEADER_TEXT = "#FFFFFF"
TABLE_STRIPE_BG = "#F8FAFC"
STATUS_TEXT_COLOR = "#059669"

# ── Callouts and badges ──────────────────────────────────────────────

ACCENT_BG = "#F0F9FF"
ACCENT_BORDER = "#0EA5E9"
BADGE_COLOR = "#DC2626"

# ── Progress bar ─────────────────────────────────────────────────────

PROGRESS_FILL = "#BAA377"
PROGRESS_TRACK = "#E5E7EB"

# ── Domain indicators ────────────────────────────────────────────────

DOMAIN_STATUS_COLORS: dict[DomainStatus, str] = {
    DomainStatus.CONCERN: "#F97316",
    DomainStatus.PRESERVED: "#22C55E",
}

# ── Question score styles ────────────────────────────────────────────
# text / background / border / label per style.  Every style must differ
# in all four so the states remain distinguishable in print.

SCORE_STYLES: dict[ScoreStyle, dict[str, str]] = {
    ScoreStyle.POSITIVE: {
        "text": "#4B5563",
        "background": "#FFFFFF",
        "border": "#E2E8F0",
        "label": "Scored",
    },
    ScoreStyle.ALERT: {
        "text": "#DC2626",
        "background": "#FEF2F2",
        "border": "#FECACA",
        "label": "Needs review",
    },
    ScoreStyle.NO_DATA: {
        "text": "#6B7280",
        "background": "#F3F4F6",
        "border": "#D1D5DB",
        "label": "Not scored",
    },
}

SCORE_STYLE_CSS_CLASSES: dict[ScoreStyle, str] = {
    ScoreStyle.POSITIVE: "score-positive",
    ScoreStyle.ALERT: "score-alert",
    ScoreStyle.NO_DATA: "score-none",
}
