"""
Data models for field extraction results.

Wire names are camelCase (``fieldId``, ``aiSourceText``...) because that is
what the model is asked to produce and what the assessment UI consumes.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ExtractionStrategyName(str, Enum):
    RAG = "rag"
    FALLBACK = "fallback"


class ExtractionCandidate(BaseModel):
    """A catalog field deemed relevant to a transcript by vector similarity."""
    field_id: str
    similarity: float = Field(ge=0.0, le=1.0)


class FieldExtraction(BaseModel):
    """A single field value detected in a transcript."""
    model_config = ConfigDict(populate_by_name=True)

    field_id: str = Field(alias="fieldId")
    section_id: str = Field(alias="sectionId")
    field_label: str = Field(default="", alias="fieldLabel")
    value: str
    ai_source_text: str = Field(default="", alias="aiSourceText")  # The quote that justified this extraction
    confidence_score: float = Field(default=0.8, ge=0.0, le=1.0, alias="confidenceScore")


class ExtractionOutcome(BaseModel):
    """Extractions for one transcript plus how they were produced."""
    extractions: list[FieldExtraction]
    strategy: ExtractionStrategyName
    candidates: list[ExtractionCandidate] = Field(default_factory=list)
