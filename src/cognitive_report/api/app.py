"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from cognitive_report.api.middleware.error_handler import register_error_handlers
from cognitive_report.api.routes import health, reports
from cognitive_report.clients.assessment_client import AssessmentClient
from cognitive_report.core.config import APIConfig, AppSettings
from cognitive_report.core.startup_checks import validate_settings
from cognitive_report.domain.content import load_static_content
from cognitive_report.hooks import setup_logging


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("cognitive-report")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup/shutdown lifecycle."""
    settings = AppSettings()
    validate_settings(settings)
    setup_logging(settings.observability)

    app.state.settings = settings
    app.state.content = load_static_content(settings.content.path)
    app.state.client = AssessmentClient(settings.api_client)
    app.state.export_guards = {}
    try:
        yield
    finally:
        await app.state.client.aclose()


_api_config = APIConfig()

app = FastAPI(
    title=_api_config.title,
    description=_api_config.description,
    version=_get_version(),
    lifespan=lifespan,
)

register_error_handlers(app)
app.include_router(health.router)
app.include_router(reports.router, prefix="/api")
