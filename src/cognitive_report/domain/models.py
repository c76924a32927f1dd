"""Report domain models: enums, dataclasses and the section tree.

This is the canonical location for every data structure the report pipeline
passes between stages.  Everything here is built fresh per report generation
and discarded afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from cognitive_report.exceptions import ReportDataError

NOT_AVAILABLE = "N/A"
NO_RESPONSE = "No response recorded"
NO_SCORE = "No score"


# ── Enums ────────────────────────────────────────────────────────────


class DomainStatus(str, Enum):
    """Clinical reading of a cognitive domain score."""

    CONCERN = "concern"
    PRESERVED = "preserved"


class ScoreStyle(str, Enum):
    """Visual treatment of a transcript question score."""

    POSITIVE = "positive"
    ALERT = "alert"
    NO_DATA = "no_data"


# ── Patient view model ───────────────────────────────────────────────


@dataclass(frozen=True)
class PatientViewModel:
    """Flat, display-ready view of one assessment record.

    Every field is a display string; anything missing or unusable in the raw
    record is ``"N/A"``.  ``date_of_birth`` is an estimate (June 15 of the
    birth year implied by age), not a recorded DOB.
    """

    name: str = NOT_AVAILABLE
    date_of_birth: str = NOT_AVAILABLE
    gender: str = NOT_AVAILABLE
    age_group: str = NOT_AVAILABLE
    assessment_date: str = NOT_AVAILABLE
    assessment_id: str = NOT_AVAILABLE
    report_generated: str = NOT_AVAILABLE
    physician_name: str = NOT_AVAILABLE
    call_id: str = NOT_AVAILABLE


# ── Scores ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class DomainScore:
    """Percentile result for one cognitive domain.

    ``status`` is clinical reference data, not derived from ``percentile``.
    """

    domain_name: str
    percentile: int
    status: DomainStatus
    description: str = ""

    def __post_init__(self) -> None:
        if not 0 <= self.percentile <= 100:
            raise ReportDataError(
                f"{self.domain_name}: percentile {self.percentile} outside 0-100"
            )


@dataclass(frozen=True)
class ScreeningScore:
    """Mental health screening instrument result (GDS-15, GAD-7)."""

    instrument_name: str
    raw: int
    max: int
    severity_label: str

    def __post_init__(self) -> None:
        if not 0 <= self.raw <= self.max:
            raise ReportDataError(
                f"{self.instrument_name}: raw score {self.raw} outside 0-{self.max}"
            )

    @property
    def display(self) -> str:
        return f"{self.raw}/{self.max}"


@dataclass(frozen=True)
class IADLScore:
    """Instrumental Activities of Daily Living result."""

    score: int
    total: int = 8
    independent_areas: tuple[str, ...] = ()
    support_areas: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not 0 <= self.score <= self.total:
            raise ReportDataError(f"IADL score {self.score} outside 0-{self.total}")

    @property
    def display(self) -> str:
        return f"{self.score}/{self.total}"


# ── Call transcript data ─────────────────────────────────────────────


@dataclass(frozen=True)
class QuestionResponse:
    """One scored question from the assessment call.

    ``response`` and ``score`` are ``None`` when the call did not record them;
    that is a normal display state, not an error.
    """

    question_code: str
    question_text: str | None
    response: str | None
    score: int | float | None
    number: str = ""
    interpretation: str | None = None


@dataclass(frozen=True)
class AnalysisItem:
    """One post-call analysis key/value pair."""

    label: str
    value: str


@dataclass(frozen=True)
class TranscriptTurn:
    """One utterance in the call transcript (``AGENT`` or ``PATIENT``)."""

    role: str
    text: str


@dataclass(frozen=True)
class QuestionSet:
    """All call data attached to an assessment."""

    responses: tuple[QuestionResponse, ...] = ()
    total_questions: int = 0
    answered: int = 0
    not_recorded: int = 0
    postcall_analysis: tuple[AnalysisItem, ...] = ()
    transcript: tuple[TranscriptTurn, ...] = ()


# ── Section tree blocks ──────────────────────────────────────────────


@dataclass(frozen=True)
class LabeledValue:
    """Label/value pair in a ``FieldGrid`` or metrics row."""

    label: str
    value: str


@dataclass(frozen=True)
class FieldGrid:
    """Grid of labelled values (patient details)."""

    fields: tuple[LabeledValue, ...]
    columns: int = 4
    kind: str = "field_grid"


@dataclass(frozen=True)
class Narrative:
    """Paragraph text. ``**bold**`` spans are honoured by both renderers."""

    text: str
    title: str = ""
    kind: str = "narrative"


@dataclass(frozen=True)
class Column:
    """Table column. Status columns are centre-aligned, all others left."""

    title: str
    weight: float = 1.0
    status: bool = False


@dataclass(frozen=True)
class Table:
    """Header row plus bordered data rows."""

    columns: tuple[Column, ...]
    rows: tuple[tuple[str, ...], ...]
    title: str = ""
    kind: str = "table"


@dataclass(frozen=True)
class ListItem:
    """Bullet entry; ``label`` is rendered bold before ``text`` when set."""

    text: str
    label: str = ""


@dataclass(frozen=True)
class BulletList:
    """Titled list of items, optionally numbered (references)."""

    items: tuple[ListItem, ...]
    title: str = ""
    numbered: bool = False
    columns: int = 1
    kind: str = "bullet_list"


@dataclass(frozen=True)
class ProgressBar:
    """Proportional score bar with a ``0..total`` scale."""

    current: int
    total: int
    label: str = "Score"
    kind: str = "progress_bar"


@dataclass(frozen=True)
class ScoreTile:
    """Boxed score with caption lines."""

    value: str
    caption: str
    detail: str = ""
    label: str = "Score"


@dataclass(frozen=True)
class ScoreTiles:
    """Row of score tiles (mental health screening)."""

    tiles: tuple[ScoreTile, ...]
    title: str = ""
    kind: str = "score_tiles"


@dataclass(frozen=True)
class DomainList:
    """Domain cards grouped under one status heading."""

    title: str
    status: DomainStatus
    domains: tuple[DomainScore, ...]
    kind: str = "domain_list"


@dataclass(frozen=True)
class QuestionCard:
    """Rendered state of one ``QuestionResponse``."""

    question_text: str
    response_text: str
    score_text: str
    style: ScoreStyle
    code: str = ""
    number: str = ""


@dataclass(frozen=True)
class QuestionCards:
    """Variable-length list of question cards plus call metrics."""

    cards: tuple[QuestionCard, ...]
    metrics: tuple[LabeledValue, ...] = ()
    empty_text: str = "No question data available"
    kind: str = "question_cards"


@dataclass(frozen=True)
class Badge:
    """Outlined call-to-action pill (e.g. ``REFER NOW``)."""

    text: str
    kind: str = "badge"


@dataclass(frozen=True)
class Callout:
    """Bordered white box grouping nested blocks under a title."""

    title: str
    blocks: tuple[Block, ...] = ()
    accent: bool = False
    kind: str = "callout"


Block = Union[
    FieldGrid,
    Narrative,
    Table,
    BulletList,
    ProgressBar,
    ScoreTiles,
    DomainList,
    QuestionCards,
    Badge,
    Callout,
]


# ── Pages and document ───────────────────────────────────────────────


@dataclass(frozen=True)
class Section:
    """Header bar plus ordered body blocks."""

    section_id: str
    title: str
    blocks: tuple[Block, ...] = ()


@dataclass(frozen=True)
class Page:
    """One logical report page. Long content may wrap onto extra sheets."""

    number: int
    sections: tuple[Section, ...]


@dataclass(frozen=True)
class ReportDocument:
    """The complete, immutable report: 14 pages plus an optional call appendix."""

    patient: PatientViewModel
    pages: tuple[Page, ...]
    content_version: str = ""
    appendix: tuple[Page, ...] = field(default=())

    @property
    def all_pages(self) -> tuple[Page, ...]:
        return self.pages + self.appendix

    def page(self, number: int) -> Page:
        for page in self.all_pages:
            if page.number == number:
                return page
        raise KeyError(number)
