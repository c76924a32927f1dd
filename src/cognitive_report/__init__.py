"""cognitive-report: clinical cognitive assessment report generator.

Normalizes an assessment record, binds it to the static clinical content in
a fixed 14-page section tree, and renders that tree as an HTML preview or a
paginated PDF.
"""

from cognitive_report.domain.content import default_content, load_static_content
from cognitive_report.domain.normalizer import normalize, normalize_questions
from cognitive_report.domain.sections import build_document

__all__ = [
    "build_document",
    "default_content",
    "load_static_content",
    "normalize",
    "normalize_questions",
]
