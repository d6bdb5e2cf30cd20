"""
Derived risk scores.

Computed from the validated, normalised values of one extraction batch:
the Morse Fall Scale total from the six scored Morse items and the MEWS
(Modified Early Warning Score) from vital signs and consciousness level.
"""

from __future__ import annotations

import re
from typing import Mapping, Optional

from nursing_scribe.schemas.risk import RiskLevel, RiskScore
from nursing_scribe.schemas.validation import FieldValidation
from nursing_scribe.services.field_catalog import MORSE_FIELDS
from nursing_scribe.services.field_validator import leading_number

MORSE_MAX_SCORE = 125
MEWS_MAX_SCORE = 14

_SCORE_SUFFIX = re.compile(r"\((\d+)(?:\s*points?)?\)", re.IGNORECASE)

AVPU_SCORES = {
    "alert": 0,
    "verbal": 1,
    "response to voice": 1,
    "pain": 2,
    "response to pain": 2,
    "unresponsive": 3,
}


def embedded_score(value: str) -> Optional[int]:
    """``"Yes (25 points)"`` -> 25, ``"To speech (3)"`` -> 3."""
    match = _SCORE_SUFFIX.search(value)
    return int(match.group(1)) if match else None


def morse_level(total: int) -> RiskLevel:
    if total >= 45:
        return RiskLevel.HIGH
    if total >= 25:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def mews_level(total: int) -> RiskLevel:
    if total >= 5:
        return RiskLevel.HIGH
    if total >= 3:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def compute_morse(values: Mapping[str, str]) -> Optional[RiskScore]:
    """Sum of the Morse items present; ``None`` when no item was extracted."""
    scores = [
        embedded_score(values[field_id])
        for field_id in MORSE_FIELDS
        if field_id in values
    ]
    scores = [score for score in scores if score is not None]
    if not scores:
        return None

    total = sum(scores)
    level = morse_level(total)
    return RiskScore(
        score_name="Morse Fall Scale",
        score_value=total,
        max_score=MORSE_MAX_SCORE,
        risk_level=level,
        description=f"{level.value.capitalize()} risk for falls",
    )


def _score_systolic(systolic: float) -> int:
    if systolic <= 70:
        return 3
    if systolic <= 80:
        return 2
    if systolic <= 100:
        return 1
    if systolic < 200:
        return 0
    return 3


def _score_pulse(pulse: float) -> int:
    if pulse <= 40:
        return 3
    if pulse <= 50:
        return 2
    if pulse <= 110:
        return 0
    if pulse < 130:
        return 1
    return 3


def _score_respiratory_rate(rate: float) -> int:
    if rate <= 8:
        return 3
    if rate <= 14:
        return 1
    if rate <= 20:
        return 0
    if rate < 30:
        return 1
    return 2


def _score_temperature(temperature: float) -> int:
    if temperature <= 35:
        return 3
    if temperature <= 36:
        return 2
    if temperature <= 38:
        return 1
    if temperature <= 38.5:
        return 0
    return 2


def _score_gcs(total: float) -> int:
    if total >= 15:
        return 0
    if total == 14:
        return 1
    if total >= 9:
        return 2
    return 3


def _positive_number(values: Mapping[str, str], field_id: str) -> Optional[float]:
    if field_id not in values:
        return None
    number = leading_number(values[field_id])
    return number if number and number > 0 else None


def compute_mews(values: Mapping[str, str]) -> Optional[RiskScore]:
    """
    MEWS from systolic BP, pulse, respiratory rate, temperature and AVPU.

    The GCS total (or the sum of its components) stands in for AVPU when
    the level of consciousness was not recorded. ``None`` when none of the
    inputs is present.
    """
    total = 0
    has_input = False

    for field_id, scorer in (
        ("bp_systolic", _score_systolic),
        ("pulse", _score_pulse),
        ("respiratory_rate", _score_respiratory_rate),
        ("temperature", _score_temperature),
    ):
        number = _positive_number(values, field_id)
        if number is not None:
            has_input = True
            total += scorer(number)

    avpu = values.get("level_of_consciousness", "").strip().lower()
    if avpu:
        has_input = True
        total += AVPU_SCORES.get(avpu, 0)
    else:
        gcs_total = _positive_number(values, "gcs_total")
        if gcs_total is None:
            components = [
                embedded_score(values[field_id]) or leading_number(values[field_id]) or 0
                for field_id in ("gcs_eye", "gcs_verbal", "gcs_motor")
                if field_id in values
            ]
            gcs_total = sum(components) or None
        if gcs_total is not None:
            has_input = True
            total += _score_gcs(gcs_total)

    if not has_input:
        return None

    return RiskScore(
        score_name="MEWS",
        score_value=total,
        max_score=MEWS_MAX_SCORE,
        risk_level=mews_level(total),
        description="Modified Early Warning Score",
    )


def compute_risk_scores(validations: list[FieldValidation]) -> list[RiskScore]:
    """Scores derivable from the valid values of one batch."""
    values = {
        v.field_id: v.validation.normalized_value
        for v in validations
        if v.validation.is_valid
    }
    scores = [compute_morse(values), compute_mews(values)]
    return [score for score in scores if score is not None]
