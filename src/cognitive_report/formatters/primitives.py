"""Layout primitives shared by the PDF and HTML renderers.

Anything that must come out identically in both outputs (progress bar
geometry, column alignment, inline emphasis) is computed here once.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from cognitive_report.domain.models import Column


@dataclass(frozen=True)
class ProgressGeometry:
    """Proportional fill and tick labels for a ``current / total`` bar."""

    current: int
    total: int
    fill_ratio: float
    ticks: tuple[int, ...]

    @property
    def fill_percent(self) -> float:
        return round(self.fill_ratio * 100, 2)


def progress_geometry(current: int, total: int) -> ProgressGeometry:
    """Compute bar geometry; ``total <= 0`` yields an empty bar with a single ``0`` tick."""
    if total <= 0:
        return ProgressGeometry(current=0, total=0, fill_ratio=0.0, ticks=(0,))
    clamped = min(max(current, 0), total)
    return ProgressGeometry(
        current=clamped,
        total=total,
        fill_ratio=clamped / total,
        ticks=tuple(range(total + 1)),
    )


def column_alignment(column: Column) -> Literal["center", "left"]:
    return "center" if column.status else "left"


_BOLD_RE = re.compile(r"\*\*(.+?)\*\*", re.DOTALL)


def inline_markup(text: str) -> list[tuple[str, bool]]:
    """Split *text* into ``(segment, is_bold)`` pairs on ``**bold**`` spans.

    Unmatched ``**`` markers are kept as literal text.
    """
    segments: list[tuple[str, bool]] = []
    pos = 0
    for match in _BOLD_RE.finditer(text):
        if match.start() > pos:
            segments.append((text[pos : match.start()], False))
        segments.append((match.group(1), True))
        pos = match.end()
    if pos < len(text):
        segments.append((text[pos:], False))
    return segments
