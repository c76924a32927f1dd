"""JSON output formatter: the section tree for API responses and debugging."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any

from cognitive_report.domain.models import ReportDocument


def document_to_dict(document: ReportDocument) -> dict[str, Any]:
    """Plain-dict form of *document*, including the call appendix."""
    return dataclasses.asdict(document)


class JSONFormatter:
    """Renders a ReportDocument as indented JSON bytes."""

    def format(self, document: ReportDocument, **kwargs: Any) -> bytes:
        """Serialize *document* to pretty-printed JSON bytes."""
        return json.dumps(document_to_dict(document), indent=2, ensure_ascii=False, default=str).encode()

    def format_to_file(self, document: ReportDocument, path: Path, **kwargs: Any) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.format(document, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"
