"""Tests for the portal REST client."""

from __future__ import annotations

import base64

import httpx
import pytest

from cognitive_report.clients.assessment_client import AssessmentClient, decode_assessment_token
from cognitive_report.core.config import APIClientConfig
from cognitive_report.exceptions import AssessmentUnavailableError

_BASE = "http://portal.test/api/"


def _client(handler) -> AssessmentClient:
    http = httpx.AsyncClient(base_url=_BASE, transport=httpx.MockTransport(handler))
    return AssessmentClient(APIClientConfig(base_url=_BASE), http=http)


class TestDecodeAssessmentToken:
    def test_round_trips_urlsafe_base64(self):
        token = base64.urlsafe_b64encode(b"66f1c2a9e4b0a1b2c3d4e5f6").decode().rstrip("=")
        assert decode_assessment_token(token) == "66f1c2a9e4b0a1b2c3d4e5f6"

    @pytest.mark.parametrize("token", ["***", "", "a"])
    def test_invalid_token(self, token):
        with pytest.raises(AssessmentUnavailableError) as excinfo:
            decode_assessment_token(token)
        assert excinfo.value.status_code == 400


class TestGetAssessment:
    @pytest.mark.asyncio
    async def test_unwraps_envelope(self, raw_assessment):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(200, json={"success": True, "data": raw_assessment})

        async with _client(handler) as client:
            data = await client.get_assessment("abc123")
        assert data == raw_assessment
        assert seen == ["/api/request-assessments/abc123"]

    @pytest.mark.asyncio
    async def test_http_error_uses_server_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"success": False, "message": "Assessment not found"})

        async with _client(handler) as client:
            with pytest.raises(AssessmentUnavailableError, match="Assessment not found") as excinfo:
                await client.get_assessment("missing")
        assert excinfo.value.status_code == 404

    @pytest.mark.asyncio
    async def test_http_error_without_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="upstream down")

        async with _client(handler) as client:
            with pytest.raises(AssessmentUnavailableError, match="HTTP error! status: 503"):
                await client.get_assessment("x")

    @pytest.mark.asyncio
    async def test_success_false(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"success": False})

        async with _client(handler) as client:
            with pytest.raises(AssessmentUnavailableError, match="Failed to fetch assessment data"):
                await client.get_assessment("x")

    @pytest.mark.asyncio
    async def test_non_object_data(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"success": True, "data": None})

        async with _client(handler) as client:
            with pytest.raises(AssessmentUnavailableError, match="returned no record"):
                await client.get_assessment("x")

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(AssessmentUnavailableError, match="Failed to reach assessment service"):
                await client.get_assessment("x")


class TestGetQuestions:
    @pytest.mark.asyncio
    async def test_returns_data_object(self, raw_questions):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/request-assessments/questions/call_8f2e"
            return httpx.Response(200, json={"success": True, "data": raw_questions})

        async with _client(handler) as client:
            assert await client.get_questions("call_8f2e") == raw_questions


class TestClientLifecycle:
    @pytest.mark.asyncio
    async def test_does_not_close_injected_client(self):
        http = httpx.AsyncClient(base_url=_BASE, transport=httpx.MockTransport(lambda r: httpx.Response(204)))
        await AssessmentClient(http=http).aclose()
        assert not http.is_closed
        await http.aclose()

    @pytest.mark.asyncio
    async def test_bearer_token_header(self):
        client = AssessmentClient(APIClientConfig(base_url=_BASE, auth_token="s3cret"))
        try:
            assert client._http.headers["Authorization"] == "Bearer s3cret"
            assert str(client._http.base_url) == _BASE
        finally:
            await client.aclose()
