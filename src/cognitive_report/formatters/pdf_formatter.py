"""PDF output formatter using reportlab.

Renders a :class:`ReportDocument` as the paginated clinical report: a
repeating branded header, one physical page break per logical report page,
and every section drawn as a dark header bar over a light bordered body.
Content longer than a page flows onto the next sheet under the same header.
"""

from __future__ import annotations

import logging
import re
from io import BytesIO
from pathlib import Path
from typing import Any
from xml.sax.saxutils import escape

from cognitive_report.core.config import PDFFormattingConfig
from cognitive_report.domain.models import (
    Badge,
    Block,
    BulletList,
    Callout,
    DomainList,
    FieldGrid,
    Narrative,
    ProgressBar,
    QuestionCard,
    QuestionCards,
    ReportDocument,
    ScoreTiles,
    Section,
)
from cognitive_report.domain.models import Table as TableBlock
from cognitive_report.domain.normalizer import ordinal
from cognitive_report.formatters.pdf_styles import (
    ACCENT_BG,
    ACCENT_BORDER,
    BADGE_COLOR,
    CARD_BG,
    DIVIDER_COLOR,
    DOMAIN_STATUS_COLORS,
    MUTED_TEXT_COLOR,
    PROGRESS_FILL,
    PROGRESS_TRACK,
    SCORE_STYLES,
    SECTION_BODY_BG,
    SECTION_BORDER_COLOR,
    SECTION_HEADER_BG,
    SECTION_HEADER_TEXT,
    STATUS_TEXT_COLOR,
    TABLE_HEADER_BG,
    TABLE_HEADER_TEXT,
    TABLE_STRIPE_BG,
    TEXT_COLOR,
)
from cognitive_report.formatters.primitives import (
    ProgressGeometry,
    column_alignment,
    inline_markup,
    progress_geometry,
)

try:
    from reportlab.lib.colors import HexColor
    from reportlab.lib.enums import TA_CENTER, TA_LEFT
    from reportlab.lib.pagesizes import A4, LETTER
    from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
    from reportlab.lib.units import inch
    from reportlab.platypus import (
        BaseDocTemplate,
        Flowable,
        Frame,
        KeepInFrame,
        PageBreak,
        PageTemplate,
        Spacer,
        Table,
        TableStyle,
    )
    from reportlab.platypus import (
        Paragraph as _RawParagraph,
    )
except ImportError as _exc:
    raise ImportError(
        "reportlab is required for PDF output. Install with: pip install cognitive-report"
    ) from _exc

log = logging.getLogger(__name__)


# ── Unicode sanitization ────────────────────────────────────────────
# The standard Type 1 fonts lack glyphs for several characters used in
# the clinical copy.  Text is sanitized at the Paragraph boundary.

_UNICODE_REPLACEMENTS: dict[str, str] = {
    # Dashes / hyphens
    "\u2011": "-",       # non-breaking hyphen
    "\u2010": "-",       # hyphen
    "\u2013": "-",       # en-dash
    "\u2014": "-",       # em-dash
    # Spaces
    "\u202f": " ",       # narrow no-break space
    "\u00a0": " ",       # non-breaking space
    # Quotes
    "\u2018": "'",       # left single quote
    "\u2019": "'",       # right single quote
    "\u201c": '"',       # left double quote
    "\u201d": '"',       # right double quote
    # Comparison signs (text is already escaped)
    "\u2265": "&gt;=",   # greater-than or equal
    "\u2264": "&lt;=",   # less-than or equal
}

_SUPERSCRIPT_DIGITS = str.maketrans("⁰¹²³⁴⁵⁶⁷⁸⁹", "0123456789")
_SUPERSCRIPT_RE = re.compile("[⁰¹²³⁴⁵⁶⁷⁸⁹]+")
_CHECKMARK = '<font name="ZapfDingbats">4</font>'


def _sanitize_text(text: str) -> str:
    for char, replacement in _UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text


def _rich(text: str) -> str:
    """Escape *text* and convert inline emphasis and footnote markers to Paragraph markup."""
    parts: list[str] = []
    for segment, bold in inline_markup(text):
        segment = escape(segment)
        segment = _SUPERSCRIPT_RE.sub(
            lambda m: f"<super>{m.group(0).translate(_SUPERSCRIPT_DIGITS)}</super>", segment
        )
        segment = segment.replace("✅", _CHECKMARK)
        parts.append(f"<b>{segment}</b>" if bold else segment)
    return "".join(parts)


def Paragraph(text: str, *args: Any, **kwargs: Any) -> _RawParagraph:  # noqa: N802
    """Sanitized Paragraph wrapper; *text* must already be Paragraph markup."""
    return _RawParagraph(_sanitize_text(str(text)), *args, **kwargs)


# ── Page size lookup ─────────────────────────────────────────────────

_PAGE_SIZES = {"letter": LETTER, "a4": A4}

_PAD = 8


def _hex(color_str: str) -> HexColor:
    return HexColor(color_str)


# ── Custom flowables ─────────────────────────────────────────────────


class _ProgressBarFlowable(Flowable):
    """Proportional bar with ``0..total`` tick labels and a score box."""

    _BOX_WIDTH = 64
    _BAR_HEIGHT = 8

    def __init__(self, geometry: ProgressGeometry, label: str, width: float, font: str) -> None:
        super().__init__()
        self.geometry = geometry
        self.label = label
        self.font = font
        self.width = width
        self.height = 36

    def wrap(self, availWidth: float, availHeight: float) -> tuple[float, float]:
        self.width = min(self.width, availWidth)
        return self.width, self.height

    def draw(self) -> None:
        c = self.canv
        geo = self.geometry
        bar_w = self.width - self._BOX_WIDTH - 12
        bar_y = 20

        c.setFillColor(_hex(PROGRESS_TRACK))
        c.roundRect(0, bar_y, bar_w, self._BAR_HEIGHT, 3, stroke=0, fill=1)
        if geo.fill_ratio > 0:
            c.setFillColor(_hex(PROGRESS_FILL))
            c.roundRect(0, bar_y, bar_w * geo.fill_ratio, self._BAR_HEIGHT, 3, stroke=0, fill=1)

        c.setFillColor(_hex(MUTED_TEXT_COLOR))
        c.setFont(self.font, 7)
        steps = len(geo.ticks) - 1
        for i, tick in enumerate(geo.ticks):
            x = bar_w * i / steps if steps else 0
            if i == 0:
                c.drawString(x, 8, str(tick))
            elif i == steps:
                c.drawRightString(x, 8, str(tick))
            else:
                c.drawCentredString(x, 8, str(tick))

        box_x = bar_w + 12
        c.setStrokeColor(_hex(SECTION_BORDER_COLOR))
        c.setFillColor(_hex(CARD_BG))
        c.roundRect(box_x, 2, self._BOX_WIDTH, 32, 4, stroke=1, fill=1)
        c.setFillColor(_hex(MUTED_TEXT_COLOR))
        c.setFont(self.font, 7)
        c.drawCentredString(box_x + self._BOX_WIDTH / 2, 24, self.label)
        c.setFillColor(_hex(TEXT_COLOR))
        c.setFont(f"{self.font}-Bold", 11)
        c.drawCentredString(box_x + self._BOX_WIDTH / 2, 9, f"{geo.current}/{geo.total}")


class _Dot(Flowable):
    """Filled status indicator circle."""

    def __init__(self, color: str, size: float = 8) -> None:
        super().__init__()
        self.color = color
        self.width = size
        self.height = size

    def draw(self) -> None:
        self.canv.setFillColor(_hex(self.color))
        r = self.width / 2
        self.canv.circle(r, r, r, stroke=0, fill=1)


# ── PDFFormatter ─────────────────────────────────────────────────────


class PDFFormatter:
    """Renders a ``ReportDocument`` as the paginated clinical report PDF."""

    def __init__(self, config: PDFFormattingConfig | None = None) -> None:
        self._config = config or PDFFormattingConfig()
        self._page_size: tuple[float, float] = _PAGE_SIZES.get(self._config.page_size, A4)
        self._margin: float = self._config.margin_inches * inch
        self._header_height: float = self._config.header_height_inches * inch
        self._styles = self._build_styles()

    # ── Public API ───────────────────────────────────────────────────

    def format(self, document: ReportDocument, **kwargs: Any) -> bytes:
        """Render *document* to PDF bytes."""
        buffer = BytesIO()
        frame = Frame(
            self._margin,
            self._margin,
            self._content_width(),
            self._frame_height(),
            id="main",
            leftPadding=0,
            rightPadding=0,
            topPadding=0,
            bottomPadding=0,
        )
        template = PageTemplate(id="report", frames=[frame], onPage=self._header)
        doc = BaseDocTemplate(
            buffer,
            pagesize=self._page_size,
            leftMargin=self._margin,
            rightMargin=self._margin,
            topMargin=self._margin + self._header_height,
            bottomMargin=self._margin,
            title=f"{self._config.subtitle} - {document.patient.name}",
            author=self._config.brand_name,
        )
        doc.addPageTemplates([template])
        doc.build(self._build_story(document))
        return buffer.getvalue()

    def format_to_file(self, document: ReportDocument, path: Path, **kwargs: Any) -> Path:
        """Write PDF to *path* and return it."""
        path.write_bytes(self.format(document, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/pdf"

    # ── Style setup ──────────────────────────────────────────────────

    def _build_styles(self) -> dict[str, ParagraphStyle]:
        base = getSampleStyleSheet()
        font = self._config.font_family
        body_sz = self._config.body_font_size
        heading_sz = self._config.heading_font_size

        return {
            "section_header": ParagraphStyle(
                "section_header",
                parent=base["Heading2"],
                fontName=f"{font}-Bold",
                fontSize=heading_sz,
                leading=heading_sz * 1.3,
                alignment=TA_CENTER,
                textColor=_hex(SECTION_HEADER_TEXT),
                spaceBefore=0,
                spaceAfter=0,
            ),
            "subheading": ParagraphStyle(
                "subheading",
                parent=base["BodyText"],
                fontName=f"{font}-Bold",
                fontSize=body_sz + 1,
                leading=(body_sz + 1) * 1.35,
                textColor=_hex(TEXT_COLOR),
                spaceAfter=3,
            ),
            "body": ParagraphStyle(
                "body",
                parent=base["BodyText"],
                fontName=font,
                fontSize=body_sz,
                leading=body_sz * 1.4,
                textColor=_hex(TEXT_COLOR),
                spaceAfter=4,
            ),
            "bullet": ParagraphStyle(
                "bullet",
                parent=base["BodyText"],
                fontName=font,
                fontSize=body_sz,
                leading=body_sz * 1.4,
                leftIndent=14,
                bulletIndent=4,
                textColor=_hex(TEXT_COLOR),
                spaceAfter=2,
            ),
            "label": ParagraphStyle(
                "label",
                parent=base["BodyText"],
                fontName=font,
                fontSize=body_sz - 1,
                leading=(body_sz - 1) * 1.3,
                textColor=_hex(MUTED_TEXT_COLOR),
            ),
            "value": ParagraphStyle(
                "value",
                parent=base["BodyText"],
                fontName=f"{font}-Bold",
                fontSize=body_sz,
                leading=body_sz * 1.3,
                textColor=_hex(TEXT_COLOR),
            ),
            "table_header": ParagraphStyle(
                "table_header",
                parent=base["BodyText"],
                fontName=f"{font}-Bold",
                fontSize=body_sz,
                leading=body_sz * 1.3,
                textColor=_hex(TABLE_HEADER_TEXT),
            ),
            "table_cell": ParagraphStyle(
                "table_cell",
                parent=base["BodyText"],
                fontName=font,
                fontSize=body_sz,
                leading=body_sz * 1.3,
                alignment=TA_LEFT,
            ),
            "table_status": ParagraphStyle(
                "table_status",
                parent=base["BodyText"],
                fontName=f"{font}-Bold",
                fontSize=body_sz,
                leading=body_sz * 1.3,
                alignment=TA_CENTER,
                textColor=_hex(STATUS_TEXT_COLOR),
            ),
            "badge": ParagraphStyle(
                "badge",
                parent=base["BodyText"],
                fontName=f"{font}-Bold",
                fontSize=body_sz + 1,
                alignment=TA_CENTER,
                textColor=_hex(BADGE_COLOR),
            ),
            "tile_value": ParagraphStyle(
                "tile_value",
                parent=base["BodyText"],
                fontName=f"{font}-Bold",
                fontSize=heading_sz + 4,
                leading=(heading_sz + 4) * 1.2,
                alignment=TA_CENTER,
                textColor=_hex(TEXT_COLOR),
            ),
            "tile_caption": ParagraphStyle(
                "tile_caption",
                parent=base["BodyText"],
                fontName=font,
                fontSize=body_sz - 1,
                leading=(body_sz - 1) * 1.3,
                alignment=TA_CENTER,
                textColor=_hex(MUTED_TEXT_COLOR),
            ),
        }

    # ── Story assembly ───────────────────────────────────────────────

    def _build_story(self, document: ReportDocument) -> list[Flowable]:
        story: list[Flowable] = []
        for index, page in enumerate(document.all_pages):
            if index:
                story.append(PageBreak())
            for section in page.sections:
                story.extend(self._build_section(section))
        return story

    def _build_section(self, section: Section) -> list[Flowable]:
        """Header bar followed by a bordered body with one row per block."""
        cw = self._content_width()
        header = Table(
            [[Paragraph(_rich(section.title), self._styles["section_header"])]],
            colWidths=[cw],
        )
        header.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, -1), _hex(SECTION_HEADER_BG)),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                ]
            )
        )

        inner = cw - 2 * _PAD
        rows: list[list[Any]] = []
        for block in section.blocks:
            rows.extend([cell] for cell in self._block_rows(block, inner))
        if not rows:
            return [header, Spacer(1, 10)]

        body = Table(rows, colWidths=[cw], splitByRow=1)
        body.setStyle(self._box_style(SECTION_BODY_BG, SECTION_BORDER_COLOR))
        return [header, body, Spacer(1, 10)]

    @staticmethod
    def _box_style(background: str, border: str, border_width: float = 0.75) -> TableStyle:
        return TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, -1), _hex(background)),
                ("BOX", (0, 0), (-1, -1), border_width, _hex(border)),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("TOPPADDING", (0, 0), (-1, -1), 4),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ("LEFTPADDING", (0, 0), (-1, -1), _PAD),
                ("RIGHTPADDING", (0, 0), (-1, -1), _PAD),
            ]
        )

    # ── Block rendering ──────────────────────────────────────────────

    def _block_rows(self, block: Block, width: float) -> list[list[Flowable]]:
        """Render *block* as body rows; each row is a list of flowables for one cell.

        Blocks that can grow without bound (lists, question cards) yield one
        row per entry so the enclosing table can split across sheets.
        """
        if isinstance(block, QuestionCards):
            return self._question_rows(block, width)
        if isinstance(block, BulletList) and block.columns == 1:
            return self._list_rows(block)
        flowables = self._render_block(block, width)
        return [[KeepInFrame(width, self._frame_height() - 48, flowables, mode="shrink")]]

    def _render_block(self, block: Block, width: float) -> list[Flowable]:
        if isinstance(block, FieldGrid):
            return self._field_grid(block, width)
        if isinstance(block, Narrative):
            return self._narrative(block)
        if isinstance(block, TableBlock):
            return self._table(block, width)
        if isinstance(block, BulletList):
            return self._bullet_list(block, width)
        if isinstance(block, ProgressBar):
            return [self._progress_bar(block, width)]
        if isinstance(block, ScoreTiles):
            return self._score_tiles(block, width)
        if isinstance(block, DomainList):
            return self._domain_list(block, width)
        if isinstance(block, QuestionCards):
            return [f for row in self._question_rows(block, width) for f in row]
        if isinstance(block, Badge):
            return [self._badge(block)]
        if isinstance(block, Callout):
            return [self._callout(block, width)]
        raise TypeError(f"Unsupported block type: {type(block).__name__}")

    def _narrative(self, block: Narrative) -> list[Flowable]:
        items: list[Flowable] = []
        if block.title:
            items.append(Paragraph(_rich(block.title), self._styles["subheading"]))
        if block.text:
            items.append(Paragraph(_rich(block.text), self._styles["body"]))
        return items

    def _field_grid(self, block: FieldGrid, width: float) -> list[Flowable]:
        """Label-over-value cells, ``block.columns`` per row."""
        cols = max(block.columns, 1)
        cells = [
            [
                Paragraph(_rich(f.label), self._styles["label"]),
                Paragraph(_rich(f.value), self._styles["value"]),
            ]
            for f in block.fields
        ]
        rows: list[list[Any]] = []
        for i in range(0, len(cells), cols):
            row: list[Any] = cells[i : i + cols]
            row.extend([""] * (cols - len(row)))
            rows.append(row)
        if not rows:
            return []
        grid = Table(rows, colWidths=[width / cols] * cols)
        grid.setStyle(
            TableStyle(
                [
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("LEFTPADDING", (0, 0), (-1, -1), 2),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        return [grid]

    def _table(self, block: TableBlock, width: float) -> list[Flowable]:
        """Dark header row, bordered striped data rows, status columns centred."""
        items: list[Flowable] = []
        if block.title:
            items.append(Paragraph(_rich(block.title), self._styles["subheading"]))

        total_weight = sum(c.weight for c in block.columns) or 1.0
        col_widths = [width * c.weight / total_weight for c in block.columns]

        header_style = self._styles["table_header"]
        data: list[list[Any]] = [
            [
                Paragraph(
                    _rich(c.title),
                    ParagraphStyle(
                        f"th_{i}",
                        parent=header_style,
                        alignment=TA_CENTER if column_alignment(c) == "center" else TA_LEFT,
                    ),
                )
                for i, c in enumerate(block.columns)
            ]
        ]
        for row in block.rows:
            data.append(
                [
                    Paragraph(
                        _rich(value),
                        self._styles["table_status" if column.status else "table_cell"],
                    )
                    for column, value in zip(block.columns, row)
                ]
            )

        table = Table(data, colWidths=col_widths, repeatRows=1)
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), _hex(TABLE_HEADER_BG)),
                    ("ROWBACKGROUNDS", (0, 1), (-1, -1), [_hex(CARD_BG), _hex(TABLE_STRIPE_BG)]),
                    ("BOX", (0, 0), (-1, -1), 0.5, _hex(SECTION_BORDER_COLOR)),
                    ("INNERGRID", (0, 0), (-1, -1), 0.25, _hex(SECTION_BORDER_COLOR)),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        items.append(table)
        return items

    def _list_item(self, item: Any, bullet: str) -> Flowable:
        text = _rich(item.text)
        if item.label:
            text = f"<b>{_rich(item.label)}:</b> {text}"
        return Paragraph(text, self._styles["bullet"], bulletText=bullet)

    def _list_rows(self, block: BulletList) -> list[list[Flowable]]:
        rows: list[list[Flowable]] = []
        if block.title:
            rows.append([Paragraph(_rich(block.title), self._styles["subheading"])])
        for index, item in enumerate(block.items, start=1):
            bullet = f"{index}." if block.numbered else "•"
            rows.append([self._list_item(item, bullet)])
        return rows

    def _bullet_list(self, block: BulletList, width: float) -> list[Flowable]:
        if block.columns == 1:
            return [f for row in self._list_rows(block) for f in row]
        items: list[Flowable] = []
        if block.title:
            items.append(Paragraph(_rich(block.title), self._styles["subheading"]))
        cols = block.columns
        cells = [
            self._list_item(item, f"{i}." if block.numbered else "•")
            for i, item in enumerate(block.items, start=1)
        ]
        rows: list[list[Any]] = []
        for i in range(0, len(cells), cols):
            row: list[Any] = cells[i : i + cols]
            row.extend([""] * (cols - len(row)))
            rows.append(row)
        if rows:
            grid = Table(rows, colWidths=[width / cols] * cols)
            grid.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP"), ("LEFTPADDING", (0, 0), (-1, -1), 0)]))
            items.append(grid)
        return items

    def _progress_bar(self, block: ProgressBar, width: float) -> Flowable:
        geometry = progress_geometry(block.current, block.total)
        return _ProgressBarFlowable(geometry, block.label, width, self._config.font_family)

    def _score_tiles(self, block: ScoreTiles, width: float) -> list[Flowable]:
        items: list[Flowable] = []
        if block.title:
            items.append(Paragraph(_rich(block.title), self._styles["subheading"]))
        if not block.tiles:
            return items
        tile_w = width / len(block.tiles)
        cells: list[Any] = []
        for tile in block.tiles:
            content: list[Flowable] = [
                Paragraph(_rich(tile.label), self._styles["tile_caption"]),
                Paragraph(_rich(tile.value), self._styles["tile_value"]),
                Paragraph(_rich(tile.caption), self._styles["tile_caption"]),
            ]
            if tile.detail:
                content.append(Paragraph(_rich(tile.detail), self._styles["tile_caption"]))
            cells.append(content)
        row = Table([cells], colWidths=[tile_w] * len(cells))
        row.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, -1), _hex(CARD_BG)),
                    ("BOX", (0, 0), (-1, -1), 0.75, _hex(SECTION_BORDER_COLOR)),
                    ("INNERGRID", (0, 0), (-1, -1), 0.75, _hex(SECTION_BORDER_COLOR)),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                ]
            )
        )
        items.append(row)
        return items

    def _domain_list(self, block: DomainList, width: float) -> list[Flowable]:
        """Domain cards with a coloured status dot and percentile."""
        items: list[Flowable] = [Paragraph(_rich(block.title), self._styles["subheading"])]
        color = DOMAIN_STATUS_COLORS[block.status]
        rows: list[list[Any]] = []
        for domain in block.domains:
            text = f"<b>{_rich(domain.domain_name)}</b>"
            if domain.description:
                text += f"<br/>{_rich(domain.description)}"
            rows.append(
                [
                    _Dot(color),
                    Paragraph(text, self._styles["table_cell"]),
                    Paragraph(f"<b>{ordinal(domain.percentile)}</b> percentile", self._styles["table_cell"]),
                ]
            )
        if rows:
            table = Table(rows, colWidths=[16, width * 0.72 - 16, width * 0.28])
            table.setStyle(
                TableStyle(
                    [
                        ("BACKGROUND", (0, 0), (-1, -1), _hex(CARD_BG)),
                        ("LINEBELOW", (0, 0), (-1, -2), 0.25, _hex(SECTION_BORDER_COLOR)),
                        ("BOX", (0, 0), (-1, -1), 0.5, _hex(SECTION_BORDER_COLOR)),
                        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                        ("TOPPADDING", (0, 0), (-1, -1), 5),
                        ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
                    ]
                )
            )
            items.append(table)
        return items

    def _question_card(self, card: QuestionCard, width: float) -> Flowable:
        style = SCORE_STYLES[card.style]
        score = (
            f'<font color="{style["text"]}"><b>{_rich(card.score_text)}</b></font>'
            f'  <font size="7" color="{style["text"]}">[{escape(style["label"])}]</font>'
        )
        rows = [
            [Paragraph(f"<b>{_rich(card.question_text)}</b>", self._styles["table_cell"])],
            [Paragraph(_rich(card.response_text), self._styles["table_cell"])],
            [Paragraph(score, self._styles["table_cell"])],
        ]
        box = Table(rows, colWidths=[width])
        box.setStyle(self._box_style(style["background"], style["border"]))
        return box

    def _question_rows(self, block: QuestionCards, width: float) -> list[list[Flowable]]:
        rows: list[list[Flowable]] = []
        if block.metrics:
            summary = "    ".join(f"<b>{_rich(m.label)}:</b> {_rich(m.value)}" for m in block.metrics)
            rows.append([Paragraph(summary, self._styles["body"])])
        if not block.cards:
            rows.append([Paragraph(_rich(block.empty_text), self._styles["body"])])
            return rows
        for card in block.cards:
            rows.append([self._question_card(card, width), Spacer(1, 4)])
        return rows

    def _badge(self, block: Badge) -> Flowable:
        badge = Table([[Paragraph(_rich(block.text), self._styles["badge"])]], colWidths=[1.4 * inch], hAlign="LEFT")
        badge.setStyle(
            TableStyle(
                [
                    ("BOX", (0, 0), (-1, -1), 1.5, _hex(BADGE_COLOR)),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        return badge

    def _callout(self, block: Callout, width: float) -> Flowable:
        """White (or accent) bordered box grouping nested blocks."""
        inner = width - 2 * _PAD
        rows: list[list[Any]] = []
        if block.title:
            rows.append([Paragraph(_rich(block.title), self._styles["subheading"])])
        for nested in block.blocks:
            rows.append([self._render_block(nested, inner)])
        if not rows:
            rows.append([""])
        box = Table(rows, colWidths=[width], splitByRow=1)
        if block.accent:
            box.setStyle(self._box_style(ACCENT_BG, ACCENT_BORDER, 1.0))
        else:
            box.setStyle(self._box_style(CARD_BG, SECTION_BORDER_COLOR))
        return box

    # ── Header ───────────────────────────────────────────────────────

    def _header(self, canvas: Any, doc: Any) -> None:
        """Logo or brand text left, title centred, ``Page : N`` right, divider below."""
        canvas.saveState()
        width, height = self._page_size
        font = self._config.font_family
        top = height - self._margin
        bottom = top - self._header_height + 10
        middle = (top + bottom) / 2

        logo = self._config.logo_path
        if logo is not None and logo.is_file():
            canvas.drawImage(
                str(logo),
                self._margin,
                bottom + 6,
                width=1.4 * inch,
                height=top - bottom - 12,
                preserveAspectRatio=True,
                anchor="w",
                mask="auto",
            )
        else:
            if logo is not None:
                log.warning("Logo %s not found; using brand text", logo)
            canvas.setFont(f"{font}-Bold", 14)
            canvas.setFillColor(_hex(SECTION_HEADER_BG))
            canvas.drawString(self._margin, middle - 5, self._config.brand_short_name)

        canvas.setFillColor(_hex(TEXT_COLOR))
        canvas.setFont(f"{font}-Bold", self._config.heading_font_size + 2)
        canvas.drawCentredString(width / 2, middle + 3, self._config.brand_name)
        canvas.setFont(font, self._config.body_font_size + 1)
        canvas.setFillColor(_hex(MUTED_TEXT_COLOR))
        canvas.drawCentredString(width / 2, middle - 12, self._config.subtitle)

        canvas.setFont(font, self._config.body_font_size)
        canvas.drawRightString(width - self._margin, middle - 3, f"Page : {canvas.getPageNumber()}")

        canvas.setStrokeColor(_hex(DIVIDER_COLOR))
        canvas.setLineWidth(1)
        canvas.line(self._margin, bottom, width - self._margin, bottom)
        canvas.restoreState()

    def _content_width(self) -> float:
        return float(self._page_size[0]) - 2 * self._margin

    def _frame_height(self) -> float:
        return float(self._page_size[1]) - 2 * self._margin - self._header_height
