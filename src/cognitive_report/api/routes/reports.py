"""Report endpoints: HTML preview, JSON section tree and PDF download."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from cognitive_report.clients.assessment_client import decode_assessment_token
from cognitive_report.exceptions import AssessmentUnavailableError
from cognitive_report.export.encoder import SingleFlight
from cognitive_report.formatters.html_formatter import HTMLFormatter
from cognitive_report.formatters.json_formatter import document_to_dict
from cognitive_report.services.report_session import ReportSession

log = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])


def resolve_assessment_id(assessment_id: str, encoded: bool = Query(default=False)) -> str:
    """Path id as given, or decoded from a base64url portal link token."""
    if encoded:
        return decode_assessment_token(assessment_id)
    return assessment_id


def _session(request: Request) -> ReportSession:
    settings = request.app.state.settings
    return ReportSession(
        request.app.state.client,
        request.app.state.content,
        settings.pdf,
        export_config=settings.export,
    )


@router.get("/{assessment_id}/preview", response_class=HTMLResponse)
async def preview(request: Request, assessment_id: str, encoded: bool = Query(default=False)) -> HTMLResponse:
    """Scrollable HTML preview; load failures render as an inline banner."""
    try:
        resolved = resolve_assessment_id(assessment_id, encoded)
    except AssessmentUnavailableError as exc:
        html = HTMLFormatter(request.app.state.settings.pdf).render(None, error=str(exc))
        return HTMLResponse(html)
    session = _session(request)
    await session.load(resolved)
    return HTMLResponse(session.preview_html())


@router.get("/{assessment_id}/document")
async def document(request: Request, resolved: str = Depends(resolve_assessment_id)) -> JSONResponse:
    """The report section tree as JSON."""
    session = _session(request)
    await session.load(resolved)
    if session.error is not None:
        raise AssessmentUnavailableError(session.error)
    return JSONResponse(document_to_dict(session.document()))


@router.get("/{assessment_id}/pdf")
async def download_pdf(request: Request, resolved: str = Depends(resolve_assessment_id)) -> Response:
    """The report as a PDF attachment.

    409 when the report cannot be exported yet (load failed) or a request
    for the same assessment is already loading or exporting it.
    """
    guards: dict[str, SingleFlight[Response]] = request.app.state.export_guards
    guard = guards.setdefault(resolved, SingleFlight())
    if guard.in_flight:
        log.info("PDF export for %s refused: another request is in flight", resolved)
        return _in_flight()
    try:
        response = await guard.run(lambda: _load_and_export(request, resolved))
    finally:
        if guards.get(resolved) is guard and not guard.in_flight:
            del guards[resolved]
    return response if response is not None else _in_flight()


async def _load_and_export(request: Request, assessment_id: str) -> Response:
    session = _session(request)
    await session.load(assessment_id)
    if not session.export_enabled:
        return JSONResponse(
            status_code=409,
            content={"error": session.error or "Report is not ready for export", "type": "export_disabled"},
        )

    blob = await session.export_pdf()
    if blob is None:
        return _in_flight()
    return Response(
        content=blob.data,
        media_type=blob.content_type,
        headers={"Content-Disposition": f'attachment; filename="{blob.filename}"'},
    )


def _in_flight() -> JSONResponse:
    return JSONResponse(status_code=409, content={"error": "Export already in progress", "type": "export_in_flight"})
