"""
Deterministic regex extraction.

Used whenever retrieval or the model call fails. Covers the handful of
fields that can be recognised reliably from surface patterns: fall history,
temperature, blood pressure, pulse and pain score. Patterns run over the
lowercased transcript and accept English and Cantonese keywords.
"""

from __future__ import annotations

import re
from typing import Optional

from nursing_scribe.logging_config import get_logger
from nursing_scribe.schemas.extraction import FieldExtraction
from nursing_scribe.services.field_catalog import FieldCatalog

logger = get_logger(__name__)

FALL_VALUE = "Yes (25 points)"
FALL_CONFIDENCE = 0.8
VITAL_CONFIDENCE = 0.7
PAIN_CONFIDENCE = 0.6

_COUNT = r"(?:\d+|once|twice|one|two|three|four|five|several|many)"

FALL_PATTERNS = (
    re.compile(
        r"(?:fell|falling|fall down|tripped|stumbled|跌倒|跌咗|仆倒)"
        rf".*?(?:{_COUNT}\s*times?|last\s*week|recently|yesterday|today|\d+\s*次)"
    ),
    re.compile(r"(?:history|past|previous).*?(?:fall|falling|跌倒)"),
    re.compile(r"\bi\s*(?:fell|fall|跌咗).*?(\d+).*?(?:times?|次)"),
)

FALL_DENIAL = re.compile(
    r"(?:\bdenies|\bdenied|\bno|\bwithout|\bnever)\s+(?:any\s+)?"
    r"(?:history\s+of\s+|recent\s+|previous\s+|had\s+(?:a\s+|any\s+)?)?"
    r"(?:falls?|falling|fallen)\b"
    r"|沒有跌倒|冇跌倒|無跌倒"
)

# Gap between a keyword and its number stays inside one clause
_GAP = r"[^\d,;.]{0,20}?"

TEMPERATURE_PATTERN = re.compile(
    rf"(?:\btemperature\b|\btemp\b|發燒){_GAP}(\d{{2}}(?:\.\d+)?)\s*(?:°\s*c|c\b)?"
)
BLOOD_PRESSURE_PATTERN = re.compile(
    rf"(?:\bblood pressure\b|\bbp\b|血壓){_GAP}(\d{{2,3}})\s*(?:/|\bover\b)\s*(\d{{2,3}})"
)
PULSE_PATTERN = re.compile(
    rf"(?:\bpulse\b|\bheart rate\b|\bhr\b|脈搏){_GAP}(\d{{2,3}})"
)
PAIN_PATTERN = re.compile(
    rf"(?:\bpain\b|痛|疼){_GAP}(\d{{1,2}})(?:\s*/\s*10|\s*out\s*of\s*10|\s*分)?"
)


class RegexFallbackExtractor:
    """Pattern-based extraction over a fixed set of fields."""

    def __init__(self, catalog: FieldCatalog) -> None:
        self._catalog = catalog
        catalog.require(
            "morse_history_falling", "temperature", "bp_systolic",
            "bp_diastolic", "pulse", "pain_scale",
        )

    def _make(self, field_id: str, value: str, source: str, confidence: float) -> FieldExtraction:
        definition = self._catalog.lookup(field_id)
        return FieldExtraction(
            field_id=field_id,
            section_id=definition.section_id,
            field_label=definition.label,
            value=value,
            ai_source_text=source,
            confidence_score=confidence,
        )

    def _fall_history(self, text: str) -> Optional[FieldExtraction]:
        if FALL_DENIAL.search(text):
            logger.debug("fall_history_denied")
            return None
        for pattern in FALL_PATTERNS:
            match = pattern.search(text)
            if match:
                return self._make("morse_history_falling", FALL_VALUE, match.group(0), FALL_CONFIDENCE)
        return None

    def extract(self, transcript_text: str) -> list[FieldExtraction]:
        text = transcript_text.lower()
        extractions: list[FieldExtraction] = []

        fall = self._fall_history(text)
        if fall is not None:
            extractions.append(fall)

        match = TEMPERATURE_PATTERN.search(text)
        if match:
            extractions.append(
                self._make("temperature", f"{match.group(1)}°C", match.group(0), VITAL_CONFIDENCE)
            )

        match = BLOOD_PRESSURE_PATTERN.search(text)
        if match:
            extractions.append(self._make("bp_systolic", match.group(1), match.group(0), VITAL_CONFIDENCE))
            extractions.append(self._make("bp_diastolic", match.group(2), match.group(0), VITAL_CONFIDENCE))

        match = PULSE_PATTERN.search(text)
        if match:
            extractions.append(self._make("pulse", match.group(1), match.group(0), VITAL_CONFIDENCE))

        match = PAIN_PATTERN.search(text)
        if match:
            extractions.append(self._make("pain_scale", match.group(1), match.group(0), PAIN_CONFIDENCE))

        logger.info("fallback_extraction_complete", fields_extracted=len(extractions))
        return extractions
