"""Async REST client for the assessment portal API.

Every endpoint wraps its payload in a ``{"success": bool, "data": ...}``
envelope.  The client unwraps it and turns any failure (transport error,
non-2xx status, ``success: false``, unparseable body) into
:class:`AssessmentUnavailableError`.
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any

import httpx

from cognitive_report.core.config import APIClientConfig
from cognitive_report.core.types import JsonDict
from cognitive_report.exceptions import AssessmentUnavailableError

log = logging.getLogger(__name__)


def decode_assessment_token(token: str) -> str:
    """Decode the URL-safe base64 assessment id used in portal report links.

    Raises:
        AssessmentUnavailableError: If *token* is not valid base64url text.
    """
    normalized = token.strip().replace("-", "+").replace("_", "/")
    padded = normalized + "=" * (-len(normalized) % 4)
    try:
        decoded = base64.b64decode(padded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError) as exc:
        raise AssessmentUnavailableError(f"Invalid assessment link token: {token!r}", status_code=400) from exc
    if not decoded:
        raise AssessmentUnavailableError("Empty assessment link token", status_code=400)
    return decoded


class AssessmentClient:
    """Fetches assessment records and call question data."""

    def __init__(self, config: APIClientConfig | None = None, *, http: httpx.AsyncClient | None = None) -> None:
        self._config = config or APIClientConfig()
        headers = {"Accept": "application/json"}
        if self._config.auth_token:
            headers["Authorization"] = f"Bearer {self._config.auth_token}"
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(
            base_url=self._config.base_url.rstrip("/") + "/",
            timeout=self._config.timeout,
            headers=headers,
        )

    async def __aenter__(self) -> AssessmentClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def get_assessment(self, assessment_id: str) -> JsonDict:
        """``GET /request-assessments/:id``: the raw assessment record."""
        data = await self._get(f"request-assessments/{assessment_id}")
        if not isinstance(data, dict):
            raise AssessmentUnavailableError(f"Assessment {assessment_id} returned no record")
        return data

    async def get_questions(self, call_id: str) -> Any:
        """``GET /request-assessments/questions/:callId``: the questions ``data`` object."""
        return await self._get(f"request-assessments/questions/{call_id}")

    async def _get(self, path: str) -> Any:
        try:
            response = await self._http.get(path)
        except httpx.HTTPError as exc:
            log.warning("Portal request %s failed: %s", path, exc)
            raise AssessmentUnavailableError(f"Failed to reach assessment service: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        message = body.get("message") if isinstance(body, dict) else None
        if response.is_error:
            log.warning("Portal request %s returned HTTP %d", path, response.status_code)
            raise AssessmentUnavailableError(
                message or f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )
        if not isinstance(body, dict) or not body.get("success"):
            raise AssessmentUnavailableError(
                message or "Failed to fetch assessment data",
                status_code=response.status_code,
            )
        return body.get("data")
