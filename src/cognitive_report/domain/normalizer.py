"""Assessment data normalizer.

Turns a raw assessment record (as returned by the portal API) into the flat
:class:`PatientViewModel` the section builder binds to, and the raw
questions payload into a :class:`QuestionSet`.

Both entry points are total: partial, malformed or empty input never raises,
it degrades field by field to ``"N/A"`` (or ``None`` for question values).
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime
from typing import Any

from cognitive_report.domain.models import (
    NO_RESPONSE,
    NO_SCORE,
    NOT_AVAILABLE,
    AnalysisItem,
    DomainStatus,
    PatientViewModel,
    QuestionResponse,
    QuestionSet,
    TranscriptTurn,
)

log = logging.getLogger(__name__)

MAX_PLAUSIBLE_AGE = 130

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# (upper bound exclusive, label)
_AGE_BANDS: tuple[tuple[int, str], ...] = (
    (18, "<18"),
    (25, "18–24"),
    (35, "25–34"),
    (45, "35–44"),
    (55, "45–54"),
    (65, "55–64"),
    (75, "65–74"),
    (85, "75–84"),
    (95, "85–94"),
)

_ISO_DATE_RE = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})")

# Placeholders the questions endpoint substitutes for missing values.
_MISSING_SENTINELS = frozenset(
    {NO_SCORE, NO_RESPONSE, "No question text", "No interpretation recorded", ""}
)


# ── Scalar helpers ───────────────────────────────────────────────────


def _coerce_age(age: Any) -> int | None:
    if isinstance(age, bool) or age is None:
        return None
    if isinstance(age, str):
        age = age.strip()
        if not age:
            return None
        try:
            age = float(age)
        except ValueError:
            return None
    if not isinstance(age, (int, float)) or not math.isfinite(age):
        return None
    whole = int(age)
    if whole <= 0 or whole > MAX_PLAUSIBLE_AGE:
        return None
    return whole


def age_group(age: Any) -> str:
    """Return the reporting age band for *age*, or ``"N/A"`` when unusable."""
    years = _coerce_age(age)
    if years is None:
        return NOT_AVAILABLE
    for upper, label in _AGE_BANDS:
        if years < upper:
            return label
    return "95+"


def _parse_date(value: Any) -> date | None:
    """Parse a date, datetime or ISO-8601 string without any timezone shift."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    match = _ISO_DATE_RE.match(value)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _parse_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        parsed = _parse_date(text)
        if parsed is None:
            return None
        return datetime(parsed.year, parsed.month, parsed.day)


def estimate_date_of_birth(age: Any, assessment_date: Any) -> date | None:
    """Approximate a date of birth as June 15 of ``assessment year - age``."""
    years = _coerce_age(age)
    assessed = _parse_date(assessment_date)
    if years is None or assessed is None:
        return None
    year = assessed.year - years
    if year < date.min.year:
        return None
    return date(year, 6, 15)


def format_date(value: Any, style: str = "long") -> str:
    """Format a date as ``March 1, 2024`` (long) or ``Mar 1, 2024`` (short)."""
    parsed = _parse_date(value)
    if parsed is None:
        return NOT_AVAILABLE
    month = _MONTHS[parsed.month - 1]
    if style == "short":
        month = month[:3]
    return f"{month} {parsed.day}, {parsed.year}"


def format_datetime(value: Any) -> str:
    """Format a timestamp as ``March 1, 2024 at 09:05 AM``."""
    parsed = _parse_datetime(value)
    if parsed is None:
        return NOT_AVAILABLE
    hour = parsed.hour % 12 or 12
    meridiem = "AM" if parsed.hour < 12 else "PM"
    return f"{format_date(parsed)} at {hour:02d}:{parsed.minute:02d} {meridiem}"


def ordinal(n: int) -> str:
    """``1 -> 1st``, ``12 -> 12th``, ``22 -> 22nd``."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def range_label(status: DomainStatus) -> str:
    """Percentile range wording for a domain status."""
    if status is DomainStatus.CONCERN:
        return "Below Typical Range"
    return "Within Typical Range"


def _text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return NOT_AVAILABLE
    text = str(value).strip()
    return text or NOT_AVAILABLE


# ── Assessment record ────────────────────────────────────────────────


def normalize(raw_assessment: Any, *, now: datetime | None = None) -> PatientViewModel:
    """Build the patient view model for one raw assessment record.

    *now* is the report generation timestamp; it defaults to the wall clock
    and is injectable so identical input yields identical output.
    """
    record = raw_assessment if isinstance(raw_assessment, dict) else {}
    if raw_assessment is not None and not isinstance(raw_assessment, dict):
        log.warning("Assessment record is %s, not an object; rendering placeholders", type(raw_assessment).__name__)

    age = record.get("age")
    assessment_date = record.get("assessmentDate")
    dob = estimate_date_of_birth(age, assessment_date)

    physician = record.get("assigningPhysician")
    physician_name = physician.get("name") if isinstance(physician, dict) else None

    batch = record.get("retellBatchCallData")
    call_id = batch.get("batch_call_id") if isinstance(batch, dict) else None

    return PatientViewModel(
        name=_text(record.get("patientName")),
        date_of_birth=format_date(dob) if dob else NOT_AVAILABLE,
        gender=_text(record.get("gender")),
        age_group=age_group(age),
        assessment_date=format_date(assessment_date, "short"),
        assessment_id=_text(record.get("_id")),
        report_generated=format_datetime(now or datetime.now()),
        physician_name=_text(physician_name),
        call_id=_text(call_id),
    )


# ── Questions payload ────────────────────────────────────────────────


def _optional_text(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    if text in _MISSING_SENTINELS:
        return None
    return text


def _optional_score(value: Any) -> int | float | None:
    """Whole scores as ``int``; fractional scores are kept as ``float``, never rounded."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text in _MISSING_SENTINELS:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if not isinstance(value, float) or not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


def _count(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int) and value >= 0:
        return value
    return default


def _question(item: Any, index: int) -> QuestionResponse | None:
    if not isinstance(item, dict):
        return None
    code = item.get("code") or item.get("questionCode") or f"question_{index}"
    text = item.get("questionText", item.get("questionString"))
    return QuestionResponse(
        question_code=str(code),
        question_text=_optional_text(text),
        response=_optional_text(item.get("response")),
        score=_optional_score(item.get("score")),
        number=str(item.get("number") or f"Q{index}"),
        interpretation=_optional_text(item.get("interpretation")),
    )


def _analysis(item: Any, index: int) -> AnalysisItem | None:
    if not isinstance(item, dict):
        return None
    label = item.get("questionText") or item.get("code") or f"ANALYSIS {index}"
    value = item.get("response", item.get("value", ""))
    if isinstance(value, list):
        value = ", ".join(str(part) for part in value)
    return AnalysisItem(label=str(label), value="" if value is None else str(value))


def _turn(item: Any) -> TranscriptTurn | None:
    if not isinstance(item, dict):
        return None
    role = str(item.get("role") or "").upper()
    role = "AGENT" if role == "AGENT" else "PATIENT"
    text = item.get("text", item.get("content"))
    return TranscriptTurn(role=role, text="" if text is None else str(text))


def normalize_questions(payload: Any) -> QuestionSet:
    """Build a :class:`QuestionSet` from the questions endpoint ``data`` object.

    A bare list is treated as the question list itself.  Entries that are not
    objects are skipped.
    """
    if isinstance(payload, list):
        payload = {"questionResponses": payload}
    if not isinstance(payload, dict):
        return QuestionSet()

    raw_questions = payload.get("questionResponses")
    responses = tuple(
        q
        for q in (_question(item, i) for i, item in enumerate(raw_questions or [], start=1))
        if q is not None
    ) if isinstance(raw_questions, list) else ()

    answered = sum(1 for r in responses if r.response is not None)

    raw_analysis = payload.get("postcallAnalysis")
    analysis = tuple(
        a
        for a in (_analysis(item, i) for i, item in enumerate(raw_analysis or [], start=1))
        if a is not None
    ) if isinstance(raw_analysis, list) else ()

    raw_transcript = payload.get("conversationTranscript")
    transcript = tuple(
        t for t in (_turn(item) for item in raw_transcript or []) if t is not None
    ) if isinstance(raw_transcript, list) else ()

    return QuestionSet(
        responses=responses,
        total_questions=_count(payload.get("totalQuestions"), len(responses)),
        answered=_count(payload.get("answered"), answered),
        not_recorded=_count(payload.get("notRecorded"), len(responses) - answered),
        postcall_analysis=analysis,
        transcript=transcript,
    )
