"""
Data models for catalog field definitions and their embeddings.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FieldType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    TEXTAREA = "textarea"
    CALCULATED = "calculated"


class ValidationRules(BaseModel):
    """Hard bounds and format constraints declared by the catalog."""
    model_config = ConfigDict(frozen=True)

    min: Optional[float] = None
    max: Optional[float] = None
    pattern: Optional[str] = None

    @model_validator(mode="after")
    def _check_bounds(self) -> "ValidationRules":
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min {self.min} is greater than max {self.max}")
        return self


class FieldDefinition(BaseModel):
    """An extractable assessment form field. Immutable catalog entry."""
    model_config = ConfigDict(frozen=True)

    field_id: str
    section_id: str
    section_title: str
    label: str
    field_type: FieldType
    synonyms: tuple[str, ...] = ()
    options: Optional[tuple[str, ...]] = None
    validation_rules: ValidationRules = Field(default_factory=ValidationRules)
    extraction_hints: tuple[str, ...] = ()
    expected_format: Optional[str] = None
    unit: Optional[str] = None  # Appended to normalized numeric values

    @property
    def is_choice(self) -> bool:
        return self.field_type in (FieldType.SELECT, FieldType.RADIO)


class FieldEmbedding(BaseModel):
    """A catalog entry's embedding and the document it was computed from."""
    field_id: str
    embedding: list[float]
    source_text: str
