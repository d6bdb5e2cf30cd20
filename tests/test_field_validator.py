# tests/test_field_validator.py
"""Tests for services/field_validator.py - validation, normalisation, consistency."""

import pytest

from nursing_scribe.schemas.extraction import FieldExtraction
from nursing_scribe.services.field_validator import format_number


def _extraction(field_id, value, confidence=0.9, section_id="physical"):
    return FieldExtraction(
        field_id=field_id,
        section_id=section_id,
        value=value,
        confidence_score=confidence,
    )


class TestUnknownField:
    def test_rejected_with_value_unchanged(self, validator):
        result = validator.validate("blood_sugar", " 5.6 ")
        assert not result.is_valid
        assert result.errors == ["Unknown field ID: blood_sugar"]
        assert result.normalized_value == " 5.6 "


class TestNumericFields:
    @pytest.mark.parametrize("field_id, raw, expected", [
        ("temperature", "38.2", "38.2°C"),
        ("temperature", "38.0 degrees", "38°C"),
        ("pulse", "76", "76 bpm"),
        ("bp_systolic", "130", "130 mmHg"),
        ("bp_diastolic", "85mmHg", "85 mmHg"),
        ("respiratory_rate", "18", "18/min"),
        ("spo2", "97 percent", "97%"),
        ("pain_scale", "3", "3/10"),
    ])
    def test_normalised_with_unit(self, validator, field_id, raw, expected):
        result = validator.validate(field_id, raw)
        assert result.is_valid
        assert result.warnings == []
        assert result.normalized_value == expected

    def test_no_number_is_error(self, validator):
        result = validator.validate("pulse", "regular")
        assert not result.is_valid
        assert result.errors == ["Invalid numeric value: regular"]
        assert result.normalized_value == "regular"

    def test_pain_above_ten_is_hard_error(self, validator):
        result = validator.validate("pain_scale", "13")
        assert not result.is_valid
        assert "Pain scale must be 0-10, got: 13" in result.errors

    def test_catalog_maximum_is_error(self, validator):
        result = validator.validate("pulse", "220")
        assert not result.is_valid
        assert "Value 220 is above maximum 200" in result.errors

    def test_catalog_minimum_is_error(self, validator):
        result = validator.validate("temperature", "29")
        assert "Value 29 is below minimum 30" in result.errors

    def test_febrile_temperature_is_soft_warning(self, validator):
        result = validator.validate("temperature", "39.5")
        assert result.is_valid
        assert result.errors == []
        assert len(result.warnings) == 1
        assert result.warnings[0].startswith("Unusual temperature value: 39.5°C")
        assert result.normalized_value == "39.5°C"

    def test_implausible_but_allowed_value_warns(self, validator):
        result = validator.validate("bp_systolic", "210")
        assert result.is_valid
        assert result.warnings == ["Unusual systolic BP: 210 mmHg"]

    def test_low_spo2_warns(self, validator):
        result = validator.validate("spo2", "82")
        assert result.is_valid
        assert result.warnings == ["Unusual SpO2: 82%"]


class TestChoiceFields:
    def test_exact_match_case_insensitive(self, validator):
        result = validator.validate("morse_history_falling", "yes (25 points)")
        assert result.is_valid
        assert result.warnings == []
        assert result.normalized_value == "Yes (25 points)"

    def test_partial_match(self, validator):
        result = validator.validate("level_of_consciousness", "alert")
        assert result.normalized_value == "Alert"

        result = validator.validate("morse_history_falling", "Yes")
        assert result.is_valid
        assert result.normalized_value == "Yes (25 points)"
        assert result.warnings == ['Partial match found: "Yes" → "Yes (25 points)"']

    def test_word_overlap_match(self, validator):
        result = validator.validate("morse_ambulatory_aid", "uses a cane")
        assert result.is_valid
        assert result.normalized_value == "Crutches/cane/walker (15 points)"
        assert result.warnings == ['Partial match found: "uses a cane" → "Crutches/cane/walker (15 points)"']

    def test_match_by_embedded_score(self, validator):
        result = validator.validate("morse_gait", "scored (20)")
        assert result.is_valid
        assert result.normalized_value == "Impaired (20 points)"
        assert result.warnings[0].startswith("Matched by score")

    @pytest.mark.parametrize("raw, expected", [("scored (10)", "Weak (10 points)"), ("scored (0)", "Normal/bed rest/immobile (0 points)")])
    def test_score_match_needs_the_whole_number(self, validator, raw, expected):
        assert validator.validate("morse_gait", raw).normalized_value == expected

    def test_score_prefix_of_another_option_is_rejected(self, validator):
        result = validator.validate("morse_gait", "scored (2)")
        assert not result.is_valid
        assert result.normalized_value == "scored (2)"
        assert result.errors[0].startswith('Invalid option "scored (2)"')

    def test_invalid_option_lists_valid_ones(self, validator):
        result = validator.validate("appetite", "ravenous")
        assert not result.is_valid
        assert result.errors == ['Invalid option "ravenous". Valid options: Good, Fair, Poor, NPO']
        assert result.normalized_value == "ravenous"

    def test_empty_option_is_error(self, validator):
        assert not validator.validate("appetite", "  ").is_valid


class TestTextFields:
    def test_trimmed(self, validator):
        result = validator.validate("current_complaint", "  shortness of breath  ")
        assert result.normalized_value == "shortness of breath"
        assert result.warnings == []

    def test_empty_text_warns(self, validator):
        result = validator.validate("current_complaint", "   ")
        assert result.is_valid
        assert result.warnings == ["Empty text value"]

    def test_very_long_text_warns(self, validator):
        result = validator.validate("current_complaint", "x" * 1001)
        assert result.is_valid
        assert result.warnings == ["Very long text (1001 characters)"]

    @pytest.mark.parametrize("raw", ["91234567", "9123 4567", "+65 91234567", "+6591234567"])
    def test_phone_normalised(self, validator, raw):
        result = validator.validate("emergency_contact_1_phone", raw)
        assert result.normalized_value == "+65 9123 4567"
        assert result.warnings == []

    def test_unrecognised_phone_warns(self, validator):
        result = validator.validate("emergency_contact_1_phone", "12-34")
        assert result.is_valid
        assert result.warnings == ["Phone number format may be incorrect: 12-34"]


class TestOtherFields:
    def test_calculated_field_empty_warns(self, validator):
        result = validator.validate("gcs_total", "")
        assert result.is_valid
        assert result.warnings == ["Empty value provided"]

    def test_low_confidence_warns(self, validator):
        result = validator.validate("current_complaint", "cough", confidence=0.3)
        assert result.is_valid
        assert result.warnings == ["Low confidence score: 0.3"]


class TestBatchConsistency:
    def test_inverted_blood_pressure_marks_both_invalid(self, validator):
        validations = validator.validate_batch([
            _extraction("bp_systolic", "80"),
            _extraction("bp_diastolic", "90"),
        ])
        by_field = {v.field_id: v.validation for v in validations}
        assert not by_field["bp_systolic"].is_valid
        assert not by_field["bp_diastolic"].is_valid
        assert "Systolic BP should be higher than diastolic BP" in by_field["bp_systolic"].errors
        assert "Diastolic BP should be lower than systolic BP" in by_field["bp_diastolic"].errors

    def test_fever_with_low_pulse_warns_both(self, validator):
        validations = validator.validate_batch([
            _extraction("temperature", "39"),
            _extraction("pulse", "55"),
        ])
        by_field = {v.field_id: v.validation for v in validations}
        assert "High fever with unusually low pulse rate" in by_field["temperature"].warnings
        assert "Low pulse rate despite elevated temperature" in by_field["pulse"].warnings
        assert by_field["temperature"].is_valid and by_field["pulse"].is_valid

    def test_original_value_kept(self, validator):
        [validation] = validator.validate_batch([_extraction("pulse", "76")])
        assert validation.original_value == "76"
        assert validation.validation.normalized_value == "76 bpm"


class TestSummary:
    def test_counts_and_critical_errors(self, validator):
        validations = validator.validate_batch([
            _extraction("bp_systolic", "80"),
            _extraction("bp_diastolic", "90"),
            _extraction("pain_scale", "13", section_id="skin-pain"),
            _extraction("temperature", "39.5"),
            _extraction("current_complaint", "cough", confidence=0.2),
        ])
        summary = validator.summarize(validations)

        assert summary.total_fields == 5
        assert summary.valid_fields == 2
        assert summary.fields_with_errors == 3
        assert summary.fields_with_warnings == 2
        assert summary.critical_errors == [
            "Critical: bp_systolic - Systolic BP should be higher than diastolic BP",
            "Critical: bp_diastolic - Diastolic BP should be lower than systolic BP",
        ]

    def test_summary_aliases(self, validator):
        dumped = validator.summarize([]).model_dump(by_alias=True)
        assert dumped == {
            "totalFields": 0,
            "validFields": 0,
            "fieldsWithErrors": 0,
            "fieldsWithWarnings": 0,
            "criticalErrors": [],
        }


@pytest.mark.parametrize("value, expected", [(38.0, "38"), (38.25, "38.25"), (0.5, "0.5"), (120.0, "120")])
def test_format_number(value, expected):
    assert format_number(value) == expected
