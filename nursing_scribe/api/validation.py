"""
API Router: Field Validation Endpoints.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from nursing_scribe.api.dependencies import get_context
from nursing_scribe.schemas.extraction import FieldExtraction
from nursing_scribe.schemas.validation import FieldValidation, ValidationResult, ValidationSummary
from nursing_scribe.services.context import ScribeContext

router = APIRouter(prefix="/validation", tags=["Validation"])


class ValidateFieldRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    field_id: str = Field(alias="fieldId")
    value: str
    confidence_score: Optional[float] = Field(default=None, ge=0.0, le=1.0, alias="confidenceScore")


class BatchValidationRequest(BaseModel):
    extractions: list[FieldExtraction]


class BatchValidationResponse(BaseModel):
    validations: list[FieldValidation]
    summary: ValidationSummary


@router.post("", response_model=ValidationResult)
async def validate_field(
    body: ValidateFieldRequest,
    context: ScribeContext = Depends(get_context),
) -> ValidationResult:
    """Validate and normalise a single value, e.g. after a nurse edits it."""
    return context.validator.validate(body.field_id, body.value, body.confidence_score)


@router.post("/batch", response_model=BatchValidationResponse)
async def validate_batch(
    body: BatchValidationRequest,
    context: ScribeContext = Depends(get_context),
) -> BatchValidationResponse:
    """Validate a set of extractions including the cross-field checks."""
    validations = context.validator.validate_batch(body.extractions)
    return BatchValidationResponse(
        validations=validations,
        summary=context.validator.summarize(validations),
    )
