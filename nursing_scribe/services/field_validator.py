"""
Field Validator & Normalizer.

Checks extracted values against the catalog: numeric ranges and
physiological plausibility, option matching for select/radio fields, text
and phone normalisation. A batch pass then checks related vital signs
against each other. Hard errors make a value invalid; warnings only flag
it for the nurse's attention.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from nursing_scribe.logging_config import get_logger
from nursing_scribe.schemas.extraction import FieldExtraction
from nursing_scribe.schemas.field import FieldDefinition, FieldType
from nursing_scribe.schemas.validation import (
    FieldValidation,
    ValidationResult,
    ValidationSummary,
)
from nursing_scribe.services.field_catalog import VITAL_SIGN_FIELDS, FieldCatalog

logger = get_logger(__name__)

LOW_CONFIDENCE_THRESHOLD = 0.5
MAX_TEXT_LENGTH = 1000
FEVER_THRESHOLD = 38.5
BRADYCARDIA_THRESHOLD = 60

_NUMBER = re.compile(r"(\d+\.?\d*)")
_LEADING_NUMBER = re.compile(r"\s*(\d+(?:\.\d+)?)")
_PHONE = re.compile(r"(?:\+?65\s?)?(\d{4})\s?(\d{4})")
_POINTS = re.compile(r"\((\d+)\s*(?:points?)?\)", re.IGNORECASE)
_TOKEN_SPLIT = re.compile(r"[^a-z0-9]+")
_IGNORED_TOKENS = {"points", "point", "the", "and", "with", "uses", "use", "has"}

# field_id -> (low, high, warning label, unit suffix)
PLAUSIBLE_RANGES: dict[str, tuple[float, float, str, str]] = {
    "temperature": (35, 42, "Unusual temperature value", "°C"),
    "pulse": (50, 150, "Unusual pulse rate", " bpm"),
    "bp_systolic": (80, 200, "Unusual systolic BP", " mmHg"),
    "bp_diastolic": (40, 120, "Unusual diastolic BP", " mmHg"),
    "respiratory_rate": (10, 30, "Unusual respiratory rate", "/min"),
    "spo2": (85, 100, "Unusual SpO2", "%"),
}


def format_number(value: float) -> str:
    """``38.0`` -> ``"38"``, ``38.20`` -> ``"38.2"``."""
    if value == int(value):
        return str(int(value))
    return format(value, "f").rstrip("0").rstrip(".")


def leading_number(value: str) -> Optional[float]:
    match = _LEADING_NUMBER.match(value)
    return float(match.group(1)) if match else None


def _tokens(text: str) -> set[str]:
    return {
        token for token in _TOKEN_SPLIT.split(text.lower())
        if len(token) > 2 and not token.isdigit() and token not in _IGNORED_TOKENS
    }


class FieldValidator:
    """Validates and normalises extracted values against a field catalog."""

    def __init__(self, catalog: FieldCatalog) -> None:
        self._catalog = catalog

    def validate(
        self,
        field_id: str,
        raw_value: str,
        confidence: Optional[float] = None,
    ) -> ValidationResult:
        definition = self._catalog.lookup(field_id)
        if definition is None:
            return ValidationResult(
                is_valid=False,
                errors=[f"Unknown field ID: {field_id}"],
                normalized_value=raw_value,
            )

        errors: list[str] = []
        warnings: list[str] = []

        if confidence is not None and confidence < LOW_CONFIDENCE_THRESHOLD:
            warnings.append(f"Low confidence score: {confidence}")

        if definition.field_type == FieldType.NUMBER:
            normalized = self._validate_number(definition, raw_value, errors, warnings)
        elif definition.field_type in (FieldType.SELECT, FieldType.RADIO):
            normalized = self._validate_choice(definition, raw_value, errors, warnings)
        elif definition.field_type in (FieldType.TEXT, FieldType.TEXTAREA):
            normalized = self._validate_text(definition, raw_value, errors, warnings)
        else:
            normalized = raw_value.strip()
            if not normalized:
                warnings.append("Empty value provided")

        return ValidationResult(
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
            normalized_value=normalized,
        )

    def _validate_number(
        self,
        definition: FieldDefinition,
        value: str,
        errors: list[str],
        warnings: list[str],
    ) -> str:
        match = _NUMBER.search(value)
        if not match:
            errors.append(f"Invalid numeric value: {value}")
            return value

        number = float(match.group(1))
        shown = format_number(number)
        rules = definition.validation_rules

        if rules.min is not None and number < rules.min:
            errors.append(f"Value {shown} is below minimum {format_number(rules.min)}")
        if rules.max is not None and number > rules.max:
            errors.append(f"Value {shown} is above maximum {format_number(rules.max)}")

        field_id = definition.field_id
        if field_id in PLAUSIBLE_RANGES:
            low, high, label, suffix = PLAUSIBLE_RANGES[field_id]
            if number < low or number > high:
                warnings.append(f"{label}: {shown}{suffix}")
            elif field_id == "temperature" and number > FEVER_THRESHOLD:
                warnings.append(
                    f"{label}: {shown}{suffix} (febrile, above {FEVER_THRESHOLD}°C)"
                )
            return f"{shown}{suffix}"

        if field_id == "pain_scale":
            if number < 0 or number > 10:
                errors.append(f"Pain scale must be 0-10, got: {shown}")
            return f"{shown}/10"

        if definition.unit:
            return f"{shown} {definition.unit}"
        return shown

    def _validate_choice(
        self,
        definition: FieldDefinition,
        value: str,
        errors: list[str],
        warnings: list[str],
    ) -> str:
        options = definition.options or ()
        candidate = value.strip()
        lowered = candidate.lower()

        if not lowered:
            errors.append("Empty value provided")
            return candidate

        for option in options:
            if option.lower() == lowered:
                return option

        for option in options:
            option_lower = option.lower()
            if lowered in option_lower or option_lower in lowered:
                warnings.append(f'Partial match found: "{value}" → "{option}"')
                return option

        value_tokens = _tokens(lowered)
        best_option, best_hits = None, 0
        for option in options:
            hits = len(value_tokens & _tokens(option))
            if hits > best_hits:
                best_option, best_hits = option, hits
        if best_option is not None:
            warnings.append(f'Partial match found: "{value}" → "{best_option}"')
            return best_option

        if definition.field_id.startswith("morse_"):
            score = _POINTS.search(value)
            if score:
                exact_points = re.compile(rf"\({score.group(1)}\s*points?\)")
                for option in options:
                    if exact_points.search(option):
                        warnings.append(f'Matched by score: "{value}" → "{option}"')
                        return option

        errors.append(f'Invalid option "{value}". Valid options: {", ".join(options)}')
        return value

    def _validate_text(
        self,
        definition: FieldDefinition,
        value: str,
        errors: list[str],
        warnings: list[str],
    ) -> str:
        normalized = value.strip()
        if not normalized:
            warnings.append("Empty text value")
            return normalized

        if len(normalized) > MAX_TEXT_LENGTH:
            warnings.append(f"Very long text ({len(normalized)} characters)")

        if "phone" in definition.field_id:
            match = _PHONE.search(normalized)
            if match:
                normalized = f"+65 {match.group(1)} {match.group(2)}"
            elif any(ch.isdigit() for ch in normalized):
                warnings.append(f"Phone number format may be incorrect: {normalized}")

        pattern = definition.validation_rules.pattern
        if pattern and not re.search(pattern, normalized):
            warnings.append(f"Value doesn't match expected pattern: {pattern}")

        return normalized

    def validate_batch(self, extractions: Iterable[FieldExtraction]) -> list[FieldValidation]:
        """Validate every extraction, then cross-check related vital signs."""
        validations = [
            FieldValidation(
                field_id=extraction.field_id,
                original_value=extraction.value,
                validation=self.validate(
                    extraction.field_id, extraction.value, extraction.confidence_score
                ),
            )
            for extraction in extractions
        ]
        self._check_consistency(validations)
        return validations

    @staticmethod
    def _check_consistency(validations: list[FieldValidation]) -> None:
        by_field = {v.field_id: v for v in validations}

        systolic = by_field.get("bp_systolic")
        diastolic = by_field.get("bp_diastolic")
        if systolic and diastolic:
            systolic_value = leading_number(systolic.validation.normalized_value)
            diastolic_value = leading_number(diastolic.validation.normalized_value)
            if (
                systolic_value is not None
                and diastolic_value is not None
                and systolic_value <= diastolic_value
            ):
                systolic.validation.errors.append("Systolic BP should be higher than diastolic BP")
                diastolic.validation.errors.append("Diastolic BP should be lower than systolic BP")
                systolic.validation.is_valid = False
                diastolic.validation.is_valid = False
                logger.info(
                    "bp_inconsistent",
                    systolic=systolic_value,
                    diastolic=diastolic_value,
                )

        temperature = by_field.get("temperature")
        pulse = by_field.get("pulse")
        if temperature and pulse:
            temperature_value = leading_number(temperature.validation.normalized_value)
            pulse_value = leading_number(pulse.validation.normalized_value)
            if (
                temperature_value is not None
                and pulse_value is not None
                and temperature_value > FEVER_THRESHOLD
                and pulse_value < BRADYCARDIA_THRESHOLD
            ):
                temperature.validation.warnings.append("High fever with unusually low pulse rate")
                pulse.validation.warnings.append("Low pulse rate despite elevated temperature")

    @staticmethod
    def summarize(validations: Iterable[FieldValidation]) -> ValidationSummary:
        total = valid = with_errors = with_warnings = 0
        critical: list[str] = []
        for item in validations:
            total += 1
            if item.validation.is_valid:
                valid += 1
            else:
                with_errors += 1
                if item.field_id in VITAL_SIGN_FIELDS:
                    critical.append(
                        f"Critical: {item.field_id} - {', '.join(item.validation.errors)}"
                    )
            if item.validation.warnings:
                with_warnings += 1

        return ValidationSummary(
            total_fields=total,
            valid_fields=valid,
            fields_with_errors=with_errors,
            fields_with_warnings=with_warnings,
            critical_errors=critical,
        )
