"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe: always returns 200 if the process is up."""
    return {"status": "ok"}


@router.get("/ready", response_model=None)
async def ready(request: Request) -> dict[str, str] | JSONResponse:
    """Readiness probe: the content table is loaded and the portal client is up."""
    content = getattr(request.app.state, "content", None)
    if content is None or getattr(request.app.state, "client", None) is None:
        return JSONResponse(status_code=503, content={"status": "starting"})
    return {"status": "ready", "content_version": content.version}
