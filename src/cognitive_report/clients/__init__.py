"""Portal API clients."""

from cognitive_report.clients.assessment_client import AssessmentClient, decode_assessment_token

__all__ = ["AssessmentClient", "decode_assessment_token"]
