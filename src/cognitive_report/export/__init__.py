"""PDF export: filenames, off-loop serialization, atomic saves, single-flight guard."""

from cognitive_report.export.encoder import (
    EXPORT_FAILED_MESSAGE,
    PdfBlob,
    SingleFlight,
    export_to_pdf,
    report_filename,
    sanitize_patient_name,
    save_blob,
)

__all__ = [
    "EXPORT_FAILED_MESSAGE",
    "PdfBlob",
    "SingleFlight",
    "export_to_pdf",
    "report_filename",
    "sanitize_patient_name",
    "save_blob",
]
