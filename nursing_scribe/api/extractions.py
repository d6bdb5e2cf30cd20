"""
API Router: Transcript Extraction Endpoints.

``POST /extractions`` runs the full pipeline and writes the results onto
the assessment form; ``POST /extractions/preview`` runs extraction and
validation only.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from nursing_scribe.api.dependencies import get_context
from nursing_scribe.logging_config import get_logger
from nursing_scribe.schemas.extraction import ExtractionStrategyName, FieldExtraction
from nursing_scribe.schemas.transcript import TranscriptRequest, TranscriptResult
from nursing_scribe.schemas.validation import FieldValidation, ValidationSummary
from nursing_scribe.services.context import ScribeContext

logger = get_logger(__name__)
router = APIRouter(prefix="/extractions", tags=["Extractions"])


class PreviewRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    transcript_text: str = Field(default="", alias="transcriptText")


class PreviewResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    strategy: ExtractionStrategyName
    extractions: list[FieldExtraction]
    validations: list[FieldValidation]
    summary: ValidationSummary


@router.post("", response_model=TranscriptResult)
async def extract_transcript(
    body: TranscriptRequest,
    context: ScribeContext = Depends(get_context),
) -> TranscriptResult:
    """Extract, validate and persist the fields mentioned in a transcript."""
    return await context.processor.process(body.assessment_id, body.transcript_text)


@router.post("/preview", response_model=PreviewResponse)
async def preview_extraction(
    body: PreviewRequest,
    context: ScribeContext = Depends(get_context),
) -> PreviewResponse:
    """Extraction and validation without touching the assessment form."""
    if not body.transcript_text.strip():
        raise ValueError("Missing required field: transcriptText")

    outcome = await context.orchestrator.extract_with_outcome(body.transcript_text)
    validations = context.validator.validate_batch(outcome.extractions)
    return PreviewResponse(
        strategy=outcome.strategy,
        extractions=outcome.extractions,
        validations=validations,
        summary=context.validator.summarize(validations),
    )
