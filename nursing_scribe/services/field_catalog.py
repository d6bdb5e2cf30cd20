"""
Field Catalog.

Typed, read-only registry of every assessment form field the scribe can
fill. Built once from ``catalog_data`` and shared by the embedding index,
the prompt builder, the fallback extractor and the validator.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Iterable, Iterator, Optional

from pydantic import ValidationError

from nursing_scribe.errors import CatalogError, UnknownFieldError
from nursing_scribe.logging_config import get_logger
from nursing_scribe.schemas.field import FieldDefinition, FieldType
from nursing_scribe.services.catalog_data import DETAILED_FIELDS, FORM_FIELDS, SECTIONS

logger = get_logger(__name__)

# Vital signs whose validation errors are escalated as critical
VITAL_SIGN_FIELDS: tuple[str, ...] = (
    "temperature",
    "pulse",
    "bp_systolic",
    "bp_diastolic",
    "respiratory_rate",
    "spo2",
)

MORSE_FIELDS: tuple[str, ...] = (
    "morse_history_falling",
    "morse_secondary_diagnosis",
    "morse_ambulatory_aid",
    "morse_iv_therapy",
    "morse_gait",
    "morse_mental_status",
)


class FieldCatalog:
    """Immutable registry of field definitions keyed by field id."""

    def __init__(self, definitions: Iterable[FieldDefinition]) -> None:
        fields: dict[str, FieldDefinition] = {}
        for definition in definitions:
            if definition.field_id in fields:
                raise CatalogError(f"Duplicate field ID: {definition.field_id}")
            if definition.is_choice and not definition.options:
                raise CatalogError(f"Choice field {definition.field_id} has no options")
            fields[definition.field_id] = definition
        self._fields = fields

    def lookup(self, field_id: str) -> Optional[FieldDefinition]:
        return self._fields.get(field_id)

    def all_entries(self) -> tuple[FieldDefinition, ...]:
        return tuple(self._fields.values())

    def by_section(self, section_id: str) -> list[FieldDefinition]:
        return [f for f in self._fields.values() if f.section_id == section_id]

    def search(self, term: str) -> list[FieldDefinition]:
        """Fields whose label or any synonym contains ``term`` (case-insensitive)."""
        needle = term.strip().lower()
        if not needle:
            return []
        return [
            f for f in self._fields.values()
            if needle in f.label.lower()
            or any(needle in synonym.lower() for synonym in f.synonyms)
        ]

    def require(self, *field_ids: str) -> None:
        """Fail fast when code references field ids the catalog does not define."""
        missing = [field_id for field_id in field_ids if field_id not in self._fields]
        if missing:
            raise UnknownFieldError(missing)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[FieldDefinition]:
        return iter(self._fields.values())


def _default_hints(label: str, section_title: str) -> tuple[str, ...]:
    return (
        f"Look for mentions of {label.lower()}",
        f"Recorded during the {section_title.lower()}",
    )


def _build_definition(raw: dict[str, Any]) -> FieldDefinition:
    section_id = raw["section_id"]
    if section_id not in SECTIONS:
        raise CatalogError(f"Unknown section {section_id!r} for field {raw['field_id']}")
    section_title = SECTIONS[section_id]
    payload = {
        **raw,
        "section_title": section_title,
        "synonyms": tuple(raw.get("synonyms", ())),
        "extraction_hints": tuple(raw.get("extraction_hints") or _default_hints(raw["label"], section_title)),
    }
    if raw.get("options") is not None:
        payload["options"] = tuple(raw["options"])
    try:
        return FieldDefinition(**payload)
    except ValidationError as e:
        raise CatalogError(f"Invalid definition for {raw['field_id']}: {e}") from e


def load_definitions() -> list[FieldDefinition]:
    """Build every FieldDefinition from the catalog source data."""
    definitions = [_build_definition(raw) for raw in DETAILED_FIELDS]
    for field_id, section_id, label, field_type, options, synonyms in FORM_FIELDS:
        definitions.append(_build_definition({
            "field_id": field_id,
            "section_id": section_id,
            "label": label,
            "field_type": FieldType(field_type),
            "options": options,
            "synonyms": synonyms,
        }))
    return definitions


@lru_cache(maxsize=1)
def get_catalog() -> FieldCatalog:
    """Return the process-wide default catalog, verified at first use."""
    catalog = FieldCatalog(load_definitions())
    catalog.require(*VITAL_SIGN_FIELDS, *MORSE_FIELDS, "pain_scale", "level_of_consciousness")
    logger.debug("field_catalog_loaded", fields=len(catalog), sections=len(SECTIONS))
    return catalog
