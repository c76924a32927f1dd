"""Static clinical content for the cognitive assessment report.

Everything a clinician may want to reword, translate or re-sign lives here,
separate from the section builder that binds it to patient data.  The
built-in table is English; an alternative table can be loaded from JSON with
the same shape via :func:`load_static_content`.

Domain percentiles and their concern/preserved status are reference values
supplied by the clinical team.  No percentile cutoff is derived from them.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from cognitive_report.domain.models import (
    DomainScore,
    DomainStatus,
    IADLScore,
    ListItem,
    ScreeningScore,
)
from cognitive_report.exceptions import ContentLoadError

log = logging.getLogger(__name__)

CONTENT_VERSION = "2024.10-en"


# ── Content shapes ───────────────────────────────────────────────────


@dataclass(frozen=True)
class TriageContent:
    heading: str
    recommendation: str
    rationale: str
    badge: str


@dataclass(frozen=True)
class CriterionRow:
    criterion: str
    status: str
    evidence: str


@dataclass(frozen=True)
class DSM5Content:
    title: str
    rows: tuple[CriterionRow, ...]
    interpretation_title: str
    interpretation_label: str
    interpretation_text: str


@dataclass(frozen=True)
class CarePriority:
    title: str
    timeframe: str
    actions: tuple[str, ...]


@dataclass(frozen=True)
class CarePlanContent:
    high_risk_title: str
    high_risk_areas: tuple[ListItem, ...]
    actions_title: str
    priorities: tuple[CarePriority, ...]


@dataclass(frozen=True)
class FollowUpRow:
    timeframe: str
    action: str
    provider: str


@dataclass(frozen=True)
class TaskFinding:
    """Result of a single assessment task within a domain."""

    task_name: str
    percentile: int
    status: DomainStatus
    description: str
    significance: str
    impact: str = ""
    interventions: str = ""


@dataclass(frozen=True)
class DomainDetail:
    name: str
    narrative: str
    task: TaskFinding


@dataclass(frozen=True)
class ScreeningDetail:
    title: str
    description: str
    score: ScreeningScore
    symptoms: tuple[str, ...]
    interpretation: str
    footnote: str = ""


@dataclass(frozen=True)
class IADLContent:
    title: str
    score: IADLScore
    functional_status: str
    description: str
    support_details: tuple[ListItem, ...]
    interpretation: str


@dataclass(frozen=True)
class ListGroup:
    title: str
    items: tuple[ListItem, ...]


@dataclass(frozen=True)
class TopicCard:
    title: str
    intro: str = ""
    groups: tuple[ListGroup, ...] = ()


@dataclass(frozen=True)
class Topic:
    """Educational section: a header bar over one or more cards."""

    heading: str
    cards: tuple[TopicCard, ...]


@dataclass(frozen=True)
class StaticContent:
    """The full clinical copy table, keyed where a page needs it by section id."""

    version: str
    locale: str
    triage: TriageContent
    dsm5: DSM5Content
    care_plan: CarePlanContent
    domain_scores: tuple[DomainScore, ...]
    iadl: IADLContent
    depression: ScreeningDetail
    anxiety: ScreeningDetail
    follow_up: tuple[FollowUpRow, ...]
    executive_summary: str
    domain_details: tuple[DomainDetail, ...]
    topics: dict[str, Topic] = field(default_factory=dict)
    glossary: tuple[ListItem, ...] = ()
    references: tuple[str, ...] = ()

    def topic(self, section_id: str) -> Topic:
        try:
            return self.topics[section_id]
        except KeyError:
            raise ContentLoadError(f"Content table {self.version} has no topic {section_id!r}") from None

    def domain_detail(self, name: str) -> DomainDetail:
        for detail in self.domain_details:
            if detail.name == name:
                return detail
        raise ContentLoadError(f"Content table {self.version} has no domain detail {name!r}")


# ── Built-in English table ───────────────────────────────────────────


def _items(*pairs: tuple[str, str]) -> tuple[ListItem, ...]:
    return tuple(ListItem(label=label, text=text) for label, text in pairs)


def _plain(*texts: str) -> tuple[ListItem, ...]:
    return tuple(ListItem(text=text) for text in texts)


_GDS = ScreeningScore(instrument_name="GDS-15", raw=2, max=15, severity_label="Minimal symptoms")
_GAD = ScreeningScore(instrument_name="GAD-7", raw=1, max=21, severity_label="Minimal symptoms")
_IADL = IADLScore(
    score=6,
    total=8,
    independent_areas=(
        "Housekeeping activities",
        "Medication management",
        "Financial handling",
        "Laundry management",
        "Meal preparation",
        "Transportation arrangements",
    ),
    support_areas=("Telephone use", "Shopping"),
)


def default_content() -> StaticContent:
    """Return the built-in English clinical content table."""
    return StaticContent(
        version=CONTENT_VERSION,
        locale="en-US",
        triage=TriageContent(
            heading="Cognitive Status Interpretation",
            recommendation=(
                "Recommend urgent neurological or geriatric psychiatry evaluation for "
                "multi-domain cognitive impairment with safety concerns; initiate "
                "dementia care management services immediately."
            ),
            rationale=(
                "Assessment findings indicate probable Major Neurocognitive Disorder with "
                "multi-domain cognitive impairment affecting attention, executive function, "
                "and memory creating immediate safety risks requiring urgent specialist "
                "evaluation and dementia care management coordination."
            ),
            badge="REFER NOW",
        ),
        dsm5=DSM5Content(
            title="DSM-5 Criteria Assessment",
            rows=(
                CriterionRow(
                    "A. Cognitive Deficits",
                    "MET",
                    "Significant impairment in Memory (14th percentile) and Reasoning "
                    "(14th percentile) domains",
                ),
                CriterionRow(
                    "B. Functional Impact",
                    "MET",
                    "IADL score 6/8 – Mild Functional decline affecting telephone use and "
                    "shopping independently",
                ),
                CriterionRow(
                    "C. Not Due to Delirium",
                    "MET",
                    "No acute confusion or fluctuating consciousness reported",
                ),
                CriterionRow(
                    "D. Not Due to Mental Disorder",
                    "MET",
                    f"Minimal depression ({_GDS.instrument_name}: {_GDS.display}) and anxiety "
                    f"({_GAD.instrument_name}: {_GAD.display}) symptoms",
                ),
            ),
            interpretation_title="Clinical Interpretation",
            interpretation_label="Probable Major Neurocognitive Disorder",
            interpretation_text=(
                "Patient meets all DSM-5 criteria for Major NCD with evidence of significant "
                "cognitive decline that interferes with independence in everyday activities."
            ),
        ),
        care_plan=CarePlanContent(
            high_risk_title="High-Risk Areas Requiring Immediate Attention:",
            high_risk_areas=_items(
                ("Financial management", "Mathematical reasoning and executive deficits increase vulnerability"),
                ("Medication management", "Memory and attention deficits affect adherence and safety"),
            ),
            actions_title="Recommended Immediate Actions",
            priorities=(
                CarePriority(
                    "Priority 1: Safety Assessment",
                    "Within 1–2 weeks",
                    (
                        "Comprehensive evaluation of driving capacity given attention and executive deficits",
                        "Medication management review with pharmacist consultation",
                        "Financial management assessment and potential protective measures",
                        "Home safety evaluation focusing on cognitive demands",
                    ),
                ),
                CarePriority(
                    "Priority 2: Specialist Referral",
                    "Within 2–4 weeks",
                    (
                        "Neurological or geriatric psychiatry evaluation for diagnostic confirmation",
                        "Neuropsychological testing for comprehensive cognitive assessment",
                        "Medical workup to exclude reversible causes of cognitive impairment",
                    ),
                ),
                CarePriority(
                    "Priority 3: Care Coordination",
                    "Within 1–3 months",
                    (
                        "Multidisciplinary care team development",
                        "Caregiver education and support resource identification",
                        "Implementation of cognitive and functional support strategies",
                        "Regular monitoring schedule establishment",
                    ),
                ),
            ),
        ),
        domain_scores=(
            DomainScore("Complex Attention", 18, DomainStatus.CONCERN, "Below typical range in attentional control"),
            DomainScore("Working Memory", 8, DomainStatus.CONCERN, "Below typical range in delayed recall"),
            DomainScore("Executive Function", 12, DomainStatus.CONCERN, "Below typical range in logical reasoning tasks"),
            DomainScore("Working Memory", 22, DomainStatus.PRESERVED, "Within typical range"),
            DomainScore("Attention", 22, DomainStatus.PRESERVED, "Within typical range"),
            DomainScore("Executive Function", 22, DomainStatus.PRESERVED, "Within typical range"),
            DomainScore("Language", 42, DomainStatus.PRESERVED, "Within typical range"),
            DomainScore("Orientation", 31, DomainStatus.PRESERVED, "Within typical range"),
        ),
        iadl=IADLContent(
            title="Instrumental Activities of Daily Living (IADL)",
            score=_IADL,
            functional_status="Mild functional decline with selective dependencies",
            description=(
                "The IADL scale evaluates an individual's ability to perform complex daily tasks "
                "necessary for independent living. This assessment is crucial for determining the "
                "level of support needed and monitoring changes over time.⁷"
            ),
            support_details=_items(
                ("Telephone Use", "Patient does not independently use telephone"),
                ("Shopping", "Requires accompaniment for shopping activities"),
            ),
            interpretation=(
                f"The IADL score of {_IADL.display} indicates **\"low function, dependent\"** status, "
                "suggesting that while basic self-care may be preserved, complex instrumental "
                "activities require increasing support. This level of functional decline is "
                "consistent with the cognitive impairments observed and supports the diagnosis of "
                "**Major Neurocognitive Disorder**."
            ),
        ),
        depression=ScreeningDetail(
            title="Depression Screening (GDS-15)",
            description=(
                "The Geriatric Depression Scale-15 is a validated 15-item screening tool for "
                "depression in older adults with cutoff ≥5 indicating possible depression and "
                "≥10 indicating likely depression.⁴"
            ),
            score=_GDS,
            symptoms=("Mild endorsement on 2 items", "All other items: No symptoms reported"),
            interpretation=(
                "The minimal depression score suggests that cognitive symptoms are not primarily "
                "attributable to mood disorder, supporting the differential diagnosis of "
                "neurocognitive disorder."
            ),
            footnote="⁴",
        ),
        anxiety=ScreeningDetail(
            title="Anxiety Screening (GAD-7)",
            description="The Generalized Anxiety Disorder-7 scale screens for anxiety symptoms and severity.⁹",
            score=_GAD,
            symptoms=(
                "Trouble controlling worry (several days in past 2 weeks)",
                "All other items: Not at all",
            ),
            interpretation=(
                "Minimal anxiety symptoms further support that cognitive impairments are not "
                "primarily due to psychiatric comorbidities."
            ),
            footnote="⁵",
        ),
        follow_up=(
            FollowUpRow("1–2 weeks", "Safety Assessment", "Primary Care/Care Management"),
            FollowUpRow("2–4 weeks", "Specialist Referral", "Neurology/Geriatrics"),
            FollowUpRow("1–3 months", "Care Plan Development", "Primary Care/Care Management"),
            FollowUpRow("6–12 months", "Cognitive reassessment", "CaringAI/Specialist"),
        ),
        executive_summary=(
            "This comprehensive cognitive assessment utilizes a battery of standardized tasks "
            "across five major cognitive domains: **Complex Attention, Executive Function, "
            "Language, Learning & Memory, and Orientation.** The assessment reveals a pattern of "
            "selective cognitive impairment with specific deficits in complex attention, memory "
            "systems, and executive function while demonstrating relative preservation in the "
            "other domains. This profile requires immediate clinical attention and comprehensive "
            "care planning."
        ),
        domain_details=(
            DomainDetail(
                name="Complex Attention",
                narrative=(
                    "Complex attention encompasses the ability to sustain focus, divide attention "
                    "between tasks, and manage cognitive load during demanding activities. This "
                    "domain showed significant impairment across multiple measures, indicating "
                    "**substantial difficulties** with attentional control and executive strain."
                ),
                task=TaskFinding(
                    task_name="Count Backward 20 to 1 (6CIT)",
                    percentile=18,
                    status=DomainStatus.CONCERN,
                    description=(
                        "Assesses sustained attention and executive control by requiring "
                        "participants to maintain focus while manipulating numerical sequences in "
                        "working memory."
                    ),
                    significance=(
                        "The impaired performance indicates dysfunction in prefrontal–parietal "
                        "attention networks and suggests difficulties with tasks requiring "
                        "sustained cognitive effort."
                    ),
                    impact=(
                        "The inability to successfully complete backward counting reflects "
                        "compromised executive attention systems that are crucial for daily "
                        "activities requiring focus and mental manipulation."
                    ),
                    interventions=(
                        "Break down complex tasks into smaller components; review medication "
                        "management and financial decision-making risks with caregiver oversight."
                    ),
                ),
            ),
            DomainDetail(
                name="Learning & Memory",
                narrative=(
                    "Memory assessment revealed significant impairment in episodic memory "
                    "formation and retention, characteristic of medial temporal lobe dysfunction.⁴"
                ),
                task=TaskFinding(
                    task_name="Delayed Address Recall (6CIT)",
                    percentile=8,
                    status=DomainStatus.CONCERN,
                    description=(
                        "Assesses the ability to remember a list of words after a delay, often "
                        "impaired early in Alzheimer's disease"
                    ),
                    significance=(
                        "This finding suggests significant difficulties with episodic memory "
                        "consolidation and retrieval"
                    ),
                    impact=(
                        "This level of impairment significantly affects daily functioning, "
                        "including difficulty remembering recent conversations, appointments, and "
                        "important information necessary for independent living."
                    ),
                    interventions=(
                        "Implement external memory aids including calendars and pill organizers; "
                        "review medication management systems."
                    ),
                ),
            ),
            DomainDetail(
                name="Executive Function",
                narrative=(
                    "Executive function encompasses higher-order cognitive processes including "
                    "working memory, cognitive flexibility, and abstract reasoning. This domain "
                    "demonstrated significant impairment across multiple measures, indicating "
                    "**substantial dysfunction** in prefrontal cortical systems.⁶"
                ),
                task=TaskFinding(
                    task_name="Digit Span Backwards (Supplemental)",
                    percentile=12,
                    status=DomainStatus.CONCERN,
                    description=(
                        "Backward digit counting requires working memory manipulation and "
                        "executive control, representing more demanding cognitive processing than "
                        "forward counting."
                    ),
                    significance=(
                        "Impaired performance indicates dysfunction in dorsolateral prefrontal "
                        "cortex and associated working memory networks."
                    ),
                    impact=(
                        "This deficit significantly impacts the ability to complete multi-step "
                        "tasks and maintain complex information in mind while manipulating it."
                    ),
                    interventions=(
                        "Establish structured daily routines; provide stepwise instructions for "
                        "complex activities."
                    ),
                ),
            ),
            DomainDetail(
                name="Orientation",
                narrative=(
                    "Orientation assessment revealed disorientation to temporal information, "
                    "indicating dysfunction in basic orientation systems."
                ),
                task=TaskFinding(
                    task_name="Year / Month / Day of Week (6CIT)",
                    percentile=31,
                    status=DomainStatus.PRESERVED,
                    description=(
                        "Temporal orientation requires intact memory systems and awareness of "
                        "current context."
                    ),
                    significance=(
                        "Performance indicates preserved function in systems responsible for "
                        "maintaining awareness of time and date."
                    ),
                ),
            ),
            DomainDetail(
                name="Language",
                narrative=(
                    "Language assessment revealed mixed performance, with specific deficits in "
                    "fluency measures while maintaining some basic language comprehension and "
                    "expression abilities."
                ),
                task=TaskFinding(
                    task_name="Sentence Repetition (2 phrases)",
                    percentile=42,
                    status=DomainStatus.PRESERVED,
                    description="Sentence repetition requires repeating two short sentence prompts.",
                    significance=(
                        "Performance suggests preserved function in language processing networks "
                        "requiring both comprehension and expression abilities."
                    ),
                    impact=(
                        "This indicates preserved effective communication, following spoken "
                        "instructions for daily interactions."
                    ),
                ),
            ),
        ),
        topics={
            "decline_overview": Topic(
                heading="Understanding Cognitive Decline and Dementia",
                cards=(
                    TopicCard(
                        title="Cognitive Assessment in Clinical Practice",
                        intro=(
                            "Cognitive decline represents a spectrum from normal aging through "
                            "**Mild Cognitive Impairment (MCI)** to **Major Neurocognitive "
                            "Disorder (dementia)**. Early identification is crucial for "
                            "implementing appropriate interventions and support systems.¹⁰"
                        ),
                    ),
                    TopicCard(
                        title="DSM-5 Diagnostic Framework",
                        intro=(
                            "The Diagnostic and Statistical Manual of Mental Disorders, Fifth "
                            "Edition (DSM-5), provides standardized criteria for neurocognitive "
                            "disorders:"
                        ),
                        groups=(
                            ListGroup(
                                "Mild Neurocognitive Disorder (MCI):",
                                _plain(
                                    "Evidence of modest cognitive decline from previous level of performance",
                                    "Cognitive deficits do not interfere with capacity for independence "
                                    "in everyday activities",
                                    "May represent prodromal stage of dementia",
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            "decline_major_ncd": Topic(
                heading="Understanding Cognitive Decline and Dementia",
                cards=(
                    TopicCard(
                        title="",
                        groups=(
                            ListGroup(
                                "Major Neurocognitive Disorder (Dementia):",
                                _plain(
                                    "Evidence of significant cognitive decline from previous level of performance",
                                    "Cognitive deficits interfere with independence in everyday activities",
                                    "Represents substantial functional impairment requiring care planning",
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            "domains_assessed": Topic(
                heading="Understanding Cognitive Decline and Dementia",
                cards=(
                    TopicCard(
                        title="Cognitive Domains Assessed",
                        intro=(
                            "CaringAI Listen evaluates key cognitive domains identified as early "
                            "markers of neurodegenerative disease:¹¹"
                        ),
                        groups=(
                            ListGroup(
                                "Memory Systems:",
                                _items(
                                    ("Episodic Memory", "Storage and retrieval of personal experiences and events"),
                                    ("Working Memory", "Temporary maintenance and manipulation of information"),
                                    ("Spatial Memory", "Navigation and location-based memory systems"),
                                ),
                            ),
                            ListGroup(
                                "Executive Functions:",
                                _items(
                                    ("Planning and Organization", "Goal-directed behavior and strategy development"),
                                    ("Inhibitory Control", "Suppression of inappropriate responses"),
                                    ("Cognitive Flexibility", "Adaptation to changing task demands"),
                                ),
                            ),
                            ListGroup(
                                "Attention and Processing:",
                                _items(
                                    ("Sustained Attention", "Maintenance of focus over time"),
                                    ("Selective Attention", "Filtering relevant from irrelevant information"),
                                    ("Processing Speed", "Rate of cognitive operations"),
                                ),
                            ),
                            ListGroup(
                                "Language and Communication:",
                                _items(
                                    ("Verbal Reasoning", "Logic and comprehension in linguistic contexts"),
                                    ("Phonological Processing", "Sound-based language manipulation"),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            "clinical_significance": Topic(
                heading="Understanding Cognitive Decline and Dementia",
                cards=(
                    TopicCard(
                        title="Clinical Significance of Findings",
                        intro=(
                            "The pattern of impairment observed—significant memory and reasoning "
                            "deficits with relative preservation of attention, executive function, "
                            "and language—is consistent with amnestic presentations commonly seen "
                            "in early Alzheimer's disease.¹² This profile suggests:"
                        ),
                        groups=(
                            ListGroup(
                                "",
                                _items(
                                    ("Primary Memory System Involvement", "Hippocampal and medial temporal lobe dysfunction"),
                                    ("Secondary Reasoning Deficits", "Possible extension to association cortices"),
                                    (
                                        "Preserved Core Functions",
                                        "Intact attention and executive networks suggest focal rather "
                                        "than global impairment",
                                    ),
                                ),
                            ),
                        ),
                    ),
                    TopicCard(
                        title="Importance of Early Detection",
                        intro="Early identification of cognitive decline enables:¹³",
                        groups=(
                            ListGroup(
                                "",
                                _plain(
                                    "Implementation of evidence-based interventions",
                                    "Safety planning and risk mitigation",
                                    "Caregiver education and support services",
                                    "Advanced directive planning",
                                    "Enrollment in clinical trials and research studies",
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            "referral_guidelines": Topic(
                heading="Clinical Decision Support",
                cards=(
                    TopicCard(
                        title="Referral Guidelines",
                        intro="Based on assessment findings, specialist evaluation is recommended to:",
                        groups=(
                            ListGroup(
                                "",
                                _plain(
                                    "Confirm diagnostic impression through comprehensive neuropsychological testing",
                                    "Evaluate for reversible causes of cognitive impairment",
                                    "Initiate appropriate pharmacological and non-pharmacological interventions",
                                    "Develop comprehensive care plans addressing safety, function, and quality of life",
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            "documentation_support": Topic(
                heading="Clinical Decision Support",
                cards=(
                    TopicCard(
                        title="Documentation and Billing Support",
                        intro="This assessment provides structured documentation supporting:",
                        groups=(
                            ListGroup(
                                "",
                                _items(
                                    ("CPT Code 99483", "Cognitive assessment and care plan services"),
                                    ("Annual Wellness Visit (AWV)", "cognitive screening requirements"),
                                    ("GUIDE Model", "dementia care coordination programs"),
                                    ("Medicare Shared Savings Program", "quality measures"),
                                ),
                            ),
                        ),
                    ),
                    TopicCard(
                        title="Quality Metrics and Outcomes",
                        intro="Regular cognitive assessment supports quality improvement initiatives:¹³",
                        groups=(
                            ListGroup(
                                "",
                                _plain(
                                    "Early detection rates for cognitive impairment",
                                    "Timely specialist referral completion",
                                    "Care plan development and implementation",
                                    "Patient and caregiver satisfaction with care coordination",
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        },
        glossary=_items(
            (
                "CaringAI Listen Enhanced Assessment",
                "A telephone-based cognitive evaluation system measuring structured cognitive "
                "tasks, designed for primary care integration and population-level screening.",
            ),
            (
                "DSM-5 Criteria",
                "Standardized diagnostic criteria from the Diagnostic and Statistical Manual of "
                "Mental Disorders, Fifth Edition, used for clinical diagnosis of neurocognitive "
                "disorders.",
            ),
            (
                "Instrumental Activities of Daily Living (IADL)",
                "Complex daily tasks required for independent community living, including "
                "telephone use, shopping, housekeeping, meal preparation, and financial management.",
            ),
            (
                "Major Neurocognitive Disorder",
                "DSM-5 term for dementia, characterized by significant cognitive decline that "
                "interferes with independence in everyday activities.",
            ),
            (
                "Mild Cognitive Impairment (MCI)",
                "Cognitive decline greater than expected for age but not severe enough to "
                "significantly interfere with daily functioning.",
            ),
            (
                "Percentile Rank",
                "Statistical measure indicating the percentage of the comparison group that "
                "scored below the patient's performance level.",
            ),
            (
                "Geriatric Depression Scale-15",
                "A validated 15-item screening tool for depression symptoms in older adults with "
                "cutoff ≥5 for possible depression.",
            ),
            (
                "GAD-7",
                "Generalized Anxiety Disorder-7 scale, a validated screening instrument for "
                "anxiety symptoms.",
            ),
            (
                "Triage Categories",
                "Clinical decision support classifications (Refer/Assess/Monitor) that guide next "
                "steps in cognitive care pathways.",
            ),
        ),
        references=(
            "American Psychiatric Association. Diagnostic and Statistical Manual of Mental "
            "Disorders, Fifth Edition (DSM-5). Arlington, VA: American Psychiatric Publishing; 2013.",
            "Centers for Medicare & Medicaid Services. CMS launches model aimed at improving "
            "dementia care – GUIDE Model. July 2024.",
            "Lawton MP, Brody EM. Assessment of older people: self-maintaining and instrumental "
            "activities of daily living. Gerontologist. 1969;9(3):179–186.",
            "Kroenke K, Spitzer RL, Williams JB. The PHQ-9: validity of a brief depression severity "
            "measure. J Gen Intern Med. 2001;16(9):606–613.",
            "Spitzer RL, Kroenke K, Williams JB, Löwe B. A brief measure for assessing generalized "
            "anxiety disorder: the GAD-7. Arch Intern Med. 2006;166(10):1092–1097.",
            "Centers for Medicare & Medicaid Services. Cognitive Assessment & Care Plan Services "
            "CPT Code 99483. Available from: "
            "https://www.cms.gov/medicare/payment/fee-schedules/physician/cognitive-assessment",
            "Brooke N, et al. The Six Item Cognitive Impairment Test (6CIT): validation and "
            "practical use. Int J Geriatr Psychiatry. 1999;14(11):936–940.",
        ),
    )


# ── JSON overrides ───────────────────────────────────────────────────

_ADAPTER = TypeAdapter(StaticContent)


def load_static_content(path: Path | None = None) -> StaticContent:
    """Load a content table from *path*, or the built-in one when *path* is None.

    The JSON document must have the same shape as :class:`StaticContent`
    (see :func:`dump_static_content` for a template).
    """
    if path is None:
        return default_content()
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ContentLoadError(f"Cannot read content table {path}: {exc}") from exc
    try:
        content = _ADAPTER.validate_python(raw)
    except ValidationError as exc:
        raise ContentLoadError(f"Invalid content table {path}: {exc}") from exc
    log.info("Loaded content table %s (%s) from %s", content.version, content.locale, path)
    return content


def dump_static_content(content: StaticContent | None = None) -> str:
    """Serialize a content table to JSON, e.g. as a starting point for a translation."""
    return _ADAPTER.dump_json(content or default_content(), indent=2).decode()
