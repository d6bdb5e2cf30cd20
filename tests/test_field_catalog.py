# tests/test_field_catalog.py
"""Tests for services/field_catalog.py - typed field registry."""

import pytest

from nursing_scribe.errors import CatalogError, UnknownFieldError
from nursing_scribe.schemas.field import FieldDefinition, FieldType, ValidationRules
from nursing_scribe.services.catalog_data import SECTIONS
from nursing_scribe.services.field_catalog import (
    MORSE_FIELDS,
    VITAL_SIGN_FIELDS,
    FieldCatalog,
    load_definitions,
)


def _definition(field_id: str, field_type: FieldType = FieldType.TEXT, **extra) -> FieldDefinition:
    return FieldDefinition(
        field_id=field_id,
        section_id="general",
        section_title="General Information",
        label=field_id.replace("_", " ").title(),
        field_type=field_type,
        **extra,
    )


class TestDefaultCatalog:
    """The catalog built from catalog_data."""

    def test_size_and_unique_ids(self, catalog):
        ids = [d.field_id for d in catalog.all_entries()]
        assert len(ids) == len(set(ids))
        assert 180 <= len(catalog) <= 220

    def test_every_section_has_fields(self, catalog):
        for section_id in SECTIONS:
            assert catalog.by_section(section_id), section_id

    def test_vitals_and_morse_present(self, catalog):
        for field_id in (*VITAL_SIGN_FIELDS, *MORSE_FIELDS, "pain_scale"):
            assert field_id in catalog

    def test_detailed_entry(self, catalog):
        temperature = catalog.lookup("temperature")
        assert temperature.field_type == FieldType.NUMBER
        assert temperature.section_id == "physical"
        assert temperature.unit == "°C"
        assert "fever" in temperature.synonyms
        assert temperature.validation_rules.min == 30
        assert temperature.validation_rules.max == 45

    def test_compact_entries_get_default_hints(self, catalog):
        gcs_total = catalog.lookup("gcs_total")
        assert gcs_total.field_type == FieldType.CALCULATED
        assert gcs_total.extraction_hints
        assert gcs_total.section_title == "Physical Assessment"

    def test_choice_fields_have_options(self, catalog):
        for definition in catalog:
            if definition.field_type in (FieldType.SELECT, FieldType.RADIO):
                assert definition.options, definition.field_id

    def test_declaration_order_preserved(self, catalog):
        loaded = [d.field_id for d in load_definitions()]
        assert [d.field_id for d in catalog.all_entries()] == loaded
        assert loaded[0] == "temperature"

    def test_lookup_unknown_returns_none(self, catalog):
        assert catalog.lookup("not_a_field") is None
        assert "not_a_field" not in catalog


class TestSearch:
    def test_search_by_synonym(self, catalog):
        ids = {d.field_id for d in catalog.search("heart rate")}
        assert "pulse" in ids

    def test_search_by_label_case_insensitive(self, catalog):
        ids = {d.field_id for d in catalog.search("SYSTOLIC")}
        assert "bp_systolic" in ids


class TestRequire:
    def test_require_known_ids(self, catalog):
        catalog.require("temperature", "pulse")

    def test_require_unknown_ids_raises(self, catalog):
        with pytest.raises(UnknownFieldError) as exc_info:
            catalog.require("temperature", "blood_sugar", "gcs_colour")
        assert exc_info.value.field_ids == ("blood_sugar", "gcs_colour")
        assert "blood_sugar" in str(exc_info.value)

    def test_unknown_field_error_is_key_error(self):
        assert issubclass(UnknownFieldError, KeyError)


class TestConstruction:
    def test_duplicate_ids_rejected(self):
        with pytest.raises(CatalogError):
            FieldCatalog([_definition("notes"), _definition("notes")])

    def test_choice_without_options_rejected(self):
        with pytest.raises(CatalogError):
            FieldCatalog([_definition("mobility", FieldType.SELECT)])

    def test_min_above_max_rejected(self):
        with pytest.raises(ValueError):
            ValidationRules(min=10, max=5)

    def test_definitions_are_frozen(self, catalog):
        with pytest.raises(Exception):
            catalog.lookup("pulse").label = "Changed"
