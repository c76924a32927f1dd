"""Shared fixtures for cognitive-report tests."""

from __future__ import annotations

import copy
from datetime import datetime
from typing import Any

import pytest

from cognitive_report.domain.content import StaticContent, default_content
from cognitive_report.domain.models import PatientViewModel, QuestionSet, ReportDocument
from cognitive_report.domain.normalizer import normalize, normalize_questions
from cognitive_report.domain.sections import build_document
from cognitive_report.exceptions import AssessmentUnavailableError

RAW_ASSESSMENT: dict[str, Any] = {
    "_id": "66f1c2a9e4b0a1b2c3d4e5f6",
    "patientName": "Margaret Ellis",
    "age": 72,
    "gender": "Female",
    "assessmentDate": "2024-03-01T00:00:00.000Z",
    "assigningPhysician": {"name": "Dr. Alan Park"},
    "retellBatchCallData": {"batch_call_id": "call_8f2e"},
    "status": "completed",
}

RAW_QUESTIONS: dict[str, Any] = {
    "callId": "call_8f2e",
    "questionResponses": [
        {
            "number": "Q1",
            "code": "year",
            "score": 1,
            "questionText": "What year is it?",
            "response": "2024",
            "interpretation": "Correct",
        },
        {
            "number": "Q2",
            "code": "count_backward",
            "score": 0,
            "questionText": "Count backward from 20 to 1.",
            "response": "20, 19, 18, 16",
            "interpretation": "Error at 17",
        },
        {
            "number": "Q3",
            "code": "address_recall",
            "score": "No score",
            "questionText": "Repeat the address I told you earlier.",
            "response": "No response recorded",
            "interpretation": "No interpretation recorded",
        },
    ],
    "totalQuestions": 3,
    "answered": 2,
    "notRecorded": 1,
    "postcallAnalysis": [
        {"questionText": "call_summary", "response": "Patient completed most tasks"},
        {"questionText": "ANALYSIS 2", "response": "fatigue, hesitation"},
    ],
    "conversationTranscript": [
        {"role": "AGENT", "text": "Hello, this is your cognitive check-in."},
        {"role": "PATIENT", "text": "Hello."},
    ],
}

FIXED_NOW = datetime(2024, 3, 1, 9, 5)


class FakeAssessmentClient:
    """Canned portal responses; records every call for assertions."""

    def __init__(
        self,
        assessment: dict[str, Any] | None = None,
        questions: Any = None,
        *,
        assessment_error: str | None = None,
        questions_error: str | None = None,
    ) -> None:
        self._assessment = assessment
        self._questions = questions
        self._assessment_error = assessment_error
        self._questions_error = questions_error
        self.calls: list[tuple[str, str]] = []

    async def get_assessment(self, assessment_id: str) -> dict[str, Any]:
        self.calls.append(("assessment", assessment_id))
        if self._assessment_error is not None:
            raise AssessmentUnavailableError(self._assessment_error, status_code=404)
        return copy.deepcopy(self._assessment or {})

    async def get_questions(self, call_id: str) -> Any:
        self.calls.append(("questions", call_id))
        if self._questions_error is not None:
            raise AssessmentUnavailableError(self._questions_error, status_code=500)
        return copy.deepcopy(self._questions)

    async def aclose(self) -> None:
        pass


@pytest.fixture
def raw_assessment() -> dict[str, Any]:
    return copy.deepcopy(RAW_ASSESSMENT)


@pytest.fixture
def raw_questions() -> dict[str, Any]:
    return copy.deepcopy(RAW_QUESTIONS)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def content() -> StaticContent:
    return default_content()


@pytest.fixture
def view_model(raw_assessment: dict[str, Any], fixed_now: datetime) -> PatientViewModel:
    return normalize(raw_assessment, now=fixed_now)


@pytest.fixture
def question_set(raw_questions: dict[str, Any]) -> QuestionSet:
    return normalize_questions(raw_questions)


@pytest.fixture
def document(view_model: PatientViewModel, content: StaticContent, question_set: QuestionSet) -> ReportDocument:
    return build_document(view_model, content, question_set)


@pytest.fixture
def fake_client(raw_assessment: dict[str, Any], raw_questions: dict[str, Any]) -> FakeAssessmentClient:
    return FakeAssessmentClient(raw_assessment, raw_questions)


@pytest.fixture
def client_factory() -> type[FakeAssessmentClient]:
    return FakeAssessmentClient
