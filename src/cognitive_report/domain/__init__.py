"""Report domain: data models, normalizer, static content and section builder."""

from cognitive_report.domain.content import StaticContent, default_content, load_static_content
from cognitive_report.domain.models import PatientViewModel, QuestionSet, ReportDocument
from cognitive_report.domain.normalizer import normalize, normalize_questions
from cognitive_report.domain.sections import PAGE_LAYOUT, build_document, build_page

__all__ = [
    "PAGE_LAYOUT",
    "PatientViewModel",
    "QuestionSet",
    "ReportDocument",
    "StaticContent",
    "build_document",
    "build_page",
    "default_content",
    "load_static_content",
    "normalize",
    "normalize_questions",
]
