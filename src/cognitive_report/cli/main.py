"""CLI for cognitive-report: render / render-file / content-template / serve commands."""

from __future__ import annotations

import asyncio
import json
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from cognitive_report.clients.assessment_client import AssessmentClient, decode_assessment_token
from cognitive_report.core.config import AppSettings
from cognitive_report.core.startup_checks import validate_settings
from cognitive_report.domain.content import dump_static_content, load_static_content
from cognitive_report.domain.models import ReportDocument
from cognitive_report.domain.normalizer import normalize, normalize_questions
from cognitive_report.domain.sections import build_document
from cognitive_report.exceptions import CognitiveReportError
from cognitive_report.export.encoder import export_to_pdf, report_filename, save_blob
from cognitive_report.formatters.html_formatter import HTMLFormatter
from cognitive_report.hooks import setup_logging
from cognitive_report.services.report_session import ReportSession

app = typer.Typer(name="cognitive-report", help="Render cognitive assessment reports as PDF and HTML")
console = Console()


class OutputFormat(str, Enum):
    pdf = "pdf"
    html = "html"
    both = "both"


def _build_settings(base_url: Optional[str], output_dir: Optional[Path], verbose: bool) -> AppSettings:
    """Build settings, overriding env defaults with CLI flags."""
    settings = AppSettings()
    if base_url:
        settings.api_client.base_url = base_url
    if output_dir:
        settings.export.output_dir = output_dir
    if verbose:
        settings.observability.log_level = "DEBUG"
    validate_settings(settings)
    setup_logging(settings.observability)
    return settings


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read {path}: {exc}") from exc


def _unwrap(payload: Any) -> Any:
    """Accept either a bare record or a ``{success, data}`` API envelope."""
    if isinstance(payload, dict) and "success" in payload and "data" in payload:
        return payload["data"]
    return payload


def _print_summary(document: ReportDocument) -> None:
    patient = document.patient
    table = Table(title="Patient Details")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for label, value in (
        ("Patient Name", patient.name),
        ("Group", patient.age_group),
        ("Assessment Date", patient.assessment_date),
        ("Assessment ID", patient.assessment_id),
    ):
        table.add_row(label, value)
    console.print(table)
    console.print(f"Pages: {len(document.pages)} (+{len(document.appendix)} appendix), content {document.content_version}")


async def _write_outputs(document: ReportDocument, settings: AppSettings, fmt: OutputFormat) -> list[Path]:
    written: list[Path] = []
    out_dir = settings.export.output_dir
    if fmt in (OutputFormat.pdf, OutputFormat.both):
        from cognitive_report.formatters.pdf_formatter import PDFFormatter

        blob = await export_to_pdf(document, PDFFormatter(settings.pdf), prefix=settings.export.filename_prefix)
        written.append(save_blob(blob, out_dir))
    if fmt in (OutputFormat.html, OutputFormat.both):
        out_dir.mkdir(parents=True, exist_ok=True)
        name = report_filename(document.patient.name, prefix=settings.export.filename_prefix)
        path = out_dir / Path(name).with_suffix(".html").name
        written.append(HTMLFormatter(settings.pdf).format_to_file(document, path))
    return written


@app.command()
def render(
    assessment_id: str = typer.Argument(..., help="Assessment id (or portal link token with --encoded)"),
    encoded: bool = typer.Option(False, "--encoded", help="Decode a base64url portal link token"),
    fmt: OutputFormat = typer.Option(OutputFormat.pdf, "--format", "-f", help="Output format"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Directory for the report files"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Portal API base URL"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Fetch an assessment from the portal and render its report."""
    settings = _build_settings(base_url, output_dir, verbose)
    content = load_static_content(settings.content.path)

    async def _run() -> list[Path]:
        resolved = decode_assessment_token(assessment_id) if encoded else assessment_id
        async with AssessmentClient(settings.api_client) as client:
            session = ReportSession(client, content, settings.pdf, export_config=settings.export)
            console.print(f"[bold]Loading assessment {resolved}[/bold]")
            await session.load(resolved)
            if session.error is not None:
                console.print(f"[red]{session.error}[/red]")
                raise typer.Exit(code=1)
            document = session.document()
            _print_summary(document)
            return await _write_outputs(document, settings, fmt)

    try:
        written = asyncio.run(_run())
    except CognitiveReportError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    for path in written:
        console.print(f"[green]Saved {path}[/green]")


@app.command("render-file")
def render_file(
    record_file: Path = typer.Argument(..., help="JSON file with the assessment record"),
    questions: Optional[Path] = typer.Option(None, "--questions", "-q", help="JSON file with question data"),
    fmt: OutputFormat = typer.Option(OutputFormat.pdf, "--format", "-f", help="Output format"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Directory for the report files"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render a report offline from JSON files."""
    settings = _build_settings(None, output_dir, verbose)
    content = load_static_content(settings.content.path)

    record = _unwrap(_read_json(record_file))
    question_set = normalize_questions(_unwrap(_read_json(questions))) if questions else None
    document = build_document(
        normalize(record, now=datetime.now()),
        content,
        question_set,
        include_appendix=settings.pdf.include_call_appendix,
    )
    _print_summary(document)

    try:
        written = asyncio.run(_write_outputs(document, settings, fmt))
    except CognitiveReportError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    for path in written:
        console.print(f"[green]Saved {path}[/green]")


@app.command("content-template")
def content_template(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the template here instead of stdout"),
) -> None:
    """Dump the built-in content table as JSON, as a starting point for an override."""
    text = dump_static_content()
    if output:
        output.write_text(text, encoding="utf-8")
        console.print(f"[green]Content template saved to {output}[/green]")
    else:
        typer.echo(text)


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", "--host"),
    port: Optional[int] = typer.Option(None, "--port", help="Defaults to COGREPORT_APP_PORT"),
) -> None:
    """Run the report API server."""
    import uvicorn

    uvicorn.run("cognitive_report.api.app:app", host=host, port=port or AppSettings().app.port)


if __name__ == "__main__":
    app()
