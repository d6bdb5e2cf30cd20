"""
Data models for validation of extracted field values.
"""

from pydantic import BaseModel, ConfigDict, Field


class ValidationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_valid: bool = Field(alias="isValid")
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    normalized_value: str = Field(alias="normalizedValue")


class FieldValidation(BaseModel):
    """Validation of one extracted field, keyed by its id."""
    model_config = ConfigDict(populate_by_name=True)

    field_id: str = Field(alias="fieldId")
    original_value: str = Field(alias="originalValue")
    validation: ValidationResult


class ValidationSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_fields: int = Field(alias="totalFields")
    valid_fields: int = Field(alias="validFields")
    fields_with_errors: int = Field(alias="fieldsWithErrors")
    fields_with_warnings: int = Field(alias="fieldsWithWarnings")
    critical_errors: list[str] = Field(default_factory=list, alias="criticalErrors")
