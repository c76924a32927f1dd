"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cognitive_report.exceptions import (
    AssessmentUnavailableError,
    CognitiveReportError,
    ContentLoadError,
    ReportExportError,
)
from cognitive_report.export.encoder import EXPORT_FAILED_MESSAGE


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(AssessmentUnavailableError)
    async def handle_unavailable(request: Request, exc: AssessmentUnavailableError) -> JSONResponse:
        status = 400 if exc.status_code == 400 else 502
        return JSONResponse(status_code=status, content={"error": str(exc), "type": "assessment_unavailable"})

    @app.exception_handler(ReportExportError)
    async def handle_export_error(request: Request, exc: ReportExportError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": EXPORT_FAILED_MESSAGE, "type": "export_error"})

    @app.exception_handler(ContentLoadError)
    async def handle_content_error(request: Request, exc: ContentLoadError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "content_error"})

    @app.exception_handler(CognitiveReportError)
    async def handle_generic_error(request: Request, exc: CognitiveReportError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "report_error"})
