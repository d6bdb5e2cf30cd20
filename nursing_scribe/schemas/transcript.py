"""
Data models for transcript processing requests and results.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from nursing_scribe.schemas.extraction import ExtractionStrategyName, FieldExtraction
from nursing_scribe.schemas.risk import RiskScore
from nursing_scribe.schemas.validation import FieldValidation, ValidationSummary

EMPTY_RESULT_MESSAGE = "No data extracted yet."


class TranscriptRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    assessment_id: str = Field(default="", alias="assessmentId")
    transcript_text: str = Field(default="", alias="transcriptText")


class TranscriptResult(BaseModel):
    """Everything produced for one transcript."""
    model_config = ConfigDict(populate_by_name=True)

    transcript_id: Optional[str] = Field(default=None, alias="transcriptId")
    assessment_id: str = Field(alias="assessmentId")
    strategy: ExtractionStrategyName
    extractions: list[FieldExtraction]
    validations: list[FieldValidation]
    summary: ValidationSummary
    persisted_fields: int = Field(default=0, alias="persistedFields")
    risk_scores: list[RiskScore] = Field(default_factory=list, alias="riskScores")
    message: Optional[str] = None
