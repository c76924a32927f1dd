"""Section builder: binds the patient view model and static content into pages.

The page layout is fixed.  Each page number maps to an ordered list of
section ids, and each section id to a builder returning a :class:`Section`.
Both renderers consume the resulting tree, so every presentation decision
that must match between HTML and PDF (labels, placeholder wording, score
styles) is made here.
"""

from __future__ import annotations

import logging
from typing import Callable

from cognitive_report.domain.content import DomainDetail, ScreeningDetail, StaticContent, Topic
from cognitive_report.domain.models import (
    NO_RESPONSE,
    NO_SCORE,
    Badge,
    Block,
    BulletList,
    Callout,
    Column,
    DomainList,
    DomainStatus,
    FieldGrid,
    LabeledValue,
    ListItem,
    Narrative,
    Page,
    PatientViewModel,
    ProgressBar,
    QuestionCard,
    QuestionCards,
    QuestionResponse,
    QuestionSet,
    ReportDocument,
    ScoreStyle,
    ScoreTile,
    ScoreTiles,
    Section,
    Table,
)
from cognitive_report.domain.normalizer import ordinal, range_label

log = logging.getLogger(__name__)

PAGE_COUNT = 14
GLOSSARY_SPLIT = 4

PAGE_LAYOUT: dict[int, tuple[str, ...]] = {
    1: ("patient_details", "clinical_triage", "dsm5_criteria"),
    2: ("care_plan",),
    3: ("domain_summary",),
    4: ("care_plan_status",),
    5: ("detailed_results",),
    6: ("domain_analysis",),
    7: ("preserved_domains",),
    8: ("functional_independent", "functional_support"),
    9: ("mental_health",),
    10: ("decline_overview", "decline_major_ncd"),
    11: ("domains_assessed", "assessment_results"),
    12: ("clinical_significance", "referral_guidelines"),
    13: ("documentation_support", "glossary_part1"),
    14: ("glossary_part2", "references"),
}

_CONCERN_DETAILS_P5 = ("Complex Attention",)
_CONCERN_DETAILS_P6 = ("Learning & Memory", "Executive Function")
_PRESERVED_DETAILS = ("Orientation", "Language")


# ── Score styling ────────────────────────────────────────────────────


def score_style(score: int | float | None) -> ScoreStyle:
    """Visual treatment for a question score.

    ``0`` is an alert, a missing score is "no data", and every other value
    (including ``1``) uses the neutral positive style.
    """
    if score is None:
        return ScoreStyle.NO_DATA
    if score == 0:
        return ScoreStyle.ALERT
    return ScoreStyle.POSITIVE


def question_card(response: QuestionResponse) -> QuestionCard:
    return QuestionCard(
        question_text=f"Q. {response.question_text or 'No question text'}",
        response_text=f"- {response.response or NO_RESPONSE}",
        score_text=NO_SCORE if response.score is None else f"Score: {response.score}",
        style=score_style(response.score),
        code=response.question_code,
        number=response.number,
    )


# ── Shared block helpers ─────────────────────────────────────────────


def _domain_detail(detail: DomainDetail) -> Callout:
    task = detail.task
    blocks: list[Block] = [
        Narrative(detail.narrative),
        Narrative(
            f"{ordinal(task.percentile)} percentile ( {range_label(task.status)} )",
            title=task.task_name,
        ),
        Narrative(task.description, title="Task Description"),
        Narrative(task.significance, title="Clinical Significance"),
    ]
    if task.impact:
        blocks.append(Narrative(task.impact, title="Functional Impact"))
    if task.interventions:
        blocks.append(Narrative(task.interventions, title="Recommended Interventions"))
    return Callout(title=f"{detail.name} Domain", blocks=tuple(blocks))


def _screening(detail: ScreeningDetail) -> Callout:
    score = detail.score
    return Callout(
        title=detail.title,
        blocks=(
            Narrative(detail.description),
            ScoreTiles(
                tiles=(ScoreTile(value=score.display, caption=f"({score.severity_label})"),),
            ),
            BulletList(items=tuple(ListItem(s) for s in detail.symptoms), title="Reported Symptoms"),
            Narrative(detail.interpretation, title="Clinical Interpretation"),
        ),
    )


def _topic_blocks(topic: Topic) -> tuple[Block, ...]:
    blocks: list[Block] = []
    for card in topic.cards:
        inner: list[Block] = []
        if card.intro:
            inner.append(Narrative(card.intro))
        inner.extend(BulletList(items=group.items, title=group.title) for group in card.groups)
        if card.title:
            blocks.append(Callout(title=card.title, blocks=tuple(inner)))
        else:
            blocks.extend(inner)
    return tuple(blocks)


def _topic_section(section_id: str, content: StaticContent) -> Section:
    topic = content.topic(section_id)
    return Section(section_id, topic.heading, _topic_blocks(topic))


# ── Section builders ─────────────────────────────────────────────────


def _patient_details(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    fields = (
        LabeledValue("Patient Name", vm.name),
        LabeledValue("Date of Birth", vm.date_of_birth),
        LabeledValue("Gender", vm.gender),
        LabeledValue("Group", vm.age_group),
        LabeledValue("Assessment Date", vm.assessment_date),
        LabeledValue("Assessment ID", vm.assessment_id),
        LabeledValue("Report Generated", vm.report_generated),
        LabeledValue("Assigning Physician", vm.physician_name),
    )
    return Section("patient_details", "Patient Details", (FieldGrid(fields),))


def _clinical_triage(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    triage = content.triage
    return Section(
        "clinical_triage",
        "Clinical Triage Recommendation",
        (
            Narrative(triage.recommendation, title=triage.heading),
            Narrative(triage.rationale, title="Rationale"),
            Badge(triage.badge),
        ),
    )


def _dsm5_criteria(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    dsm5 = content.dsm5
    table = Table(
        columns=(
            Column("Criteria", weight=1.2),
            Column("Status", weight=0.6, status=True),
            Column("Supporting Evidence", weight=2.6),
        ),
        rows=tuple((row.criterion, row.status, row.evidence) for row in dsm5.rows),
        title=dsm5.title,
    )
    interpretation = Callout(
        title=dsm5.interpretation_title,
        blocks=(Narrative(f"**{dsm5.interpretation_label}** — {dsm5.interpretation_text}"),),
        accent=True,
    )
    return Section("dsm5_criteria", "Cognitive Status Interpretation", (table, interpretation))


def _care_plan(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    plan = content.care_plan
    priorities = tuple(
        BulletList(
            items=tuple(ListItem(action) for action in priority.actions),
            title=f"{priority.title} ({priority.timeframe})",
        )
        for priority in plan.priorities
    )
    return Section(
        "care_plan",
        "Care Plan Recommendations",
        (
            BulletList(items=plan.high_risk_areas, title=plan.high_risk_title),
            Callout(title=plan.actions_title, blocks=priorities),
        ),
    )


def _domain_summary(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    concern = tuple(d for d in content.domain_scores if d.status is DomainStatus.CONCERN)
    preserved = tuple(d for d in content.domain_scores if d.status is DomainStatus.PRESERVED)
    return Section(
        "domain_summary",
        "Cognitive Domain Performance Summary",
        (
            DomainList("Domains of Concern", DomainStatus.CONCERN, concern),
            DomainList("Preserved Domains", DomainStatus.PRESERVED, preserved),
        ),
    )


def _care_plan_status(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    iadl = content.iadl
    score = iadl.score
    iadl_card = Callout(
        title=f"{iadl.title}: {score.display}",
        blocks=(
            BulletList(
                items=(
                    ListItem(iadl.functional_status, label="Functional Status"),
                    ListItem(", ".join(score.independent_areas), label="Independence"),
                    ListItem(f"{', '.join(score.support_areas)} assistance needed", label="Support"),
                ),
            ),
            ProgressBar(score.score, score.total),
        ),
    )
    tiles = ScoreTiles(
        tiles=tuple(
            ScoreTile(
                value=s.score.display,
                caption=s.score.instrument_name,
                detail=f"{s.score.display} – {s.score.severity_label}{s.footnote}",
            )
            for s in (content.depression, content.anxiety)
        ),
        title="Mental Health Screening",
    )
    follow_up = Table(
        columns=(Column("Timeframe", weight=0.8), Column("Action Required"), Column("Provider")),
        rows=tuple((row.timeframe, row.action, row.provider) for row in content.follow_up),
        title="Follow-up Schedule",
    )
    return Section("care_plan_status", "Care Plan Recommendations", (iadl_card, tiles, follow_up))


def _detailed_results(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    blocks: list[Block] = [
        Narrative(content.executive_summary, title="Executive Summary"),
        Narrative("", title="Domains of Concern"),
    ]
    blocks.extend(_domain_detail(content.domain_detail(name)) for name in _CONCERN_DETAILS_P5)
    return Section("detailed_results", "Detailed Assessment Results", tuple(blocks))


def _domain_analysis(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    blocks = tuple(_domain_detail(content.domain_detail(name)) for name in _CONCERN_DETAILS_P6)
    return Section("domain_analysis", "Cognitive Domain Analysis", blocks)


def _preserved_domains(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    blocks: list[Block] = [Narrative("", title="Preserved Domains")]
    blocks.extend(_domain_detail(content.domain_detail(name)) for name in _PRESERVED_DETAILS)
    return Section("preserved_domains", "Cognitive Domain Analysis", tuple(blocks))


def _functional_independent(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    iadl = content.iadl
    score = iadl.score
    return Section(
        "functional_independent",
        "Functional Assessment Details",
        (
            Narrative(iadl.description, title=iadl.title),
            ProgressBar(score.score, score.total),
            BulletList(
                items=tuple(ListItem(area) for area in score.independent_areas),
                title=f"Independent Areas ({len(score.independent_areas)}/{score.total} domains):",
                columns=3,
            ),
        ),
    )


def _functional_support(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    iadl = content.iadl
    score = iadl.score
    supported = len(score.support_areas)
    return Section(
        "functional_support",
        "Functional Assessment Details",
        (
            ProgressBar(supported, score.total, label="Support"),
            BulletList(
                items=iadl.support_details,
                title=f"Areas Requiring Support ({supported}/{score.total} domains):",
            ),
            Callout(title="Clinical Interpretation", blocks=(Narrative(iadl.interpretation),), accent=True),
        ),
    )


def _mental_health(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    return Section(
        "mental_health",
        "Mental Health Assessment Details",
        (_screening(content.depression), _screening(content.anxiety)),
    )


def _assessment_results(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    if questions is None:
        return Section("assessment_results", "Cognitive Assessment Results", (QuestionCards(cards=()),))
    metrics = (
        LabeledValue("Total Questions", str(questions.total_questions)),
        LabeledValue("Answered", str(questions.answered)),
        LabeledValue("Not Recorded", str(questions.not_recorded)),
    )
    cards = tuple(question_card(r) for r in questions.responses)
    return Section(
        "assessment_results",
        "Cognitive Assessment Results",
        (QuestionCards(cards=cards, metrics=metrics),),
    )


def _glossary_part1(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    return Section("glossary_part1", "Glossary of Terms", (BulletList(content.glossary[:GLOSSARY_SPLIT]),))


def _glossary_part2(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    return Section("glossary_part2", "Glossary of Terms", (BulletList(content.glossary[GLOSSARY_SPLIT:]),))


def _references(vm: PatientViewModel, content: StaticContent, questions: QuestionSet | None) -> Section:
    items = tuple(ListItem(ref) for ref in content.references)
    return Section("references", "References", (BulletList(items, numbered=True),))


SectionBuilder = Callable[[PatientViewModel, StaticContent, "QuestionSet | None"], Section]

_BUILDERS: dict[str, SectionBuilder] = {
    "patient_details": _patient_details,
    "clinical_triage": _clinical_triage,
    "dsm5_criteria": _dsm5_criteria,
    "care_plan": _care_plan,
    "domain_summary": _domain_summary,
    "care_plan_status": _care_plan_status,
    "detailed_results": _detailed_results,
    "domain_analysis": _domain_analysis,
    "preserved_domains": _preserved_domains,
    "functional_independent": _functional_independent,
    "functional_support": _functional_support,
    "mental_health": _mental_health,
    "assessment_results": _assessment_results,
    "glossary_part1": _glossary_part1,
    "glossary_part2": _glossary_part2,
    "references": _references,
}


def build_section(
    section_id: str,
    view_model: PatientViewModel,
    content: StaticContent,
    questions: QuestionSet | None = None,
) -> Section:
    builder = _BUILDERS.get(section_id)
    if builder is None:
        return _topic_section(section_id, content)
    return builder(view_model, content, questions)


# ── Pages and documents ──────────────────────────────────────────────


def build_page(
    page_number: int,
    view_model: PatientViewModel,
    content: StaticContent,
    questions: QuestionSet | None = None,
) -> Page:
    """Build logical page *page_number* (1-14).

    Raises:
        ValueError: If *page_number* is not part of the report layout.
    """
    section_ids = PAGE_LAYOUT.get(page_number)
    if section_ids is None:
        raise ValueError(f"Page {page_number} is not in the report layout (1-{PAGE_COUNT})")
    sections = tuple(build_section(sid, view_model, content, questions) for sid in section_ids)
    return Page(page_number, sections)


def build_call_appendix(questions: QuestionSet | None, *, first_page: int = PAGE_COUNT + 1) -> tuple[Page, ...]:
    """Post-call analysis and conversation transcript pages.

    Returns no pages when the call data could not be loaded at all.
    """
    if questions is None:
        return ()

    if questions.postcall_analysis:
        analysis: Block = Table(
            columns=(Column("Item", weight=1.0), Column("Response", weight=2.0)),
            rows=tuple((item.label, item.value or "N/A") for item in questions.postcall_analysis),
        )
    else:
        analysis = Narrative("No post-call analysis available")

    if questions.transcript:
        transcript: Block = BulletList(
            items=tuple(ListItem(turn.text, label=turn.role) for turn in questions.transcript),
        )
    else:
        transcript = Narrative("No conversation transcript available")

    return (
        Page(first_page, (Section("postcall_analysis", "Post-Call Analysis", (analysis,)),)),
        Page(first_page + 1, (Section("conversation_transcript", "Conversation Transcript", (transcript,)),)),
    )


def build_document(
    view_model: PatientViewModel,
    content: StaticContent,
    questions: QuestionSet | None = None,
    *,
    include_appendix: bool = False,
) -> ReportDocument:
    """Build the full report tree: pages 1-14 plus the optional call appendix."""
    pages = tuple(build_page(n, view_model, content, questions) for n in sorted(PAGE_LAYOUT))
    appendix = build_call_appendix(questions) if include_appendix else ()
    log.debug(
        "Built report for assessment %s: %d pages, %d appendix pages",
        view_model.assessment_id,
        len(pages),
        len(appendix),
    )
    return ReportDocument(
        patient=view_model,
        pages=pages,
        content_version=content.version,
        appendix=appendix,
    )
