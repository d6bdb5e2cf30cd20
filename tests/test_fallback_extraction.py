# tests/test_fallback_extraction.py
"""Tests for services/fallback_extraction.py - regex extraction."""

import pytest
from conftest import END_TO_END_TRANSCRIPT

from nursing_scribe.services.fallback_extraction import FALL_VALUE, RegexFallbackExtractor


@pytest.fixture
def extractor(catalog):
    return RegexFallbackExtractor(catalog)


def _by_field(extractions):
    return {e.field_id: e for e in extractions}


class TestFallHistory:
    @pytest.mark.parametrize("transcript", [
        "I fell three times last week",
        "She tripped in the bathroom yesterday",
        "Patient has a history of falls at home",
        "I fell 2 times this month",
        "病人上個月跌倒 3 次",
        "佢琴日跌咗 2 次",
    ])
    def test_fall_mentions(self, extractor, transcript):
        fall = _by_field(extractor.extract(transcript))["morse_history_falling"]
        assert fall.value == FALL_VALUE
        assert fall.confidence_score == 0.8
        assert fall.section_id == "risk"
        assert fall.ai_source_text

    @pytest.mark.parametrize("transcript", [
        "Patient denies falls.",
        "No history of falls.",
        "He has never fallen before",
        "No falls reported, walks independently",
        "佢冇跌倒",
    ])
    def test_denied_falls_not_extracted(self, extractor, transcript):
        assert "morse_history_falling" not in _by_field(extractor.extract(transcript))

    def test_source_text_is_matched_substring(self, extractor):
        transcript = "Daughter says I fell three times last week at home"
        fall = _by_field(extractor.extract(transcript))["morse_history_falling"]
        assert fall.ai_source_text in transcript.lower()


class TestVitals:
    def test_end_to_end_transcript(self, extractor):
        extracted = _by_field(extractor.extract(END_TO_END_TRANSCRIPT))

        assert set(extracted) == {"temperature", "bp_systolic", "bp_diastolic", "pulse"}
        assert extracted["temperature"].value == "38.2°C"
        assert extracted["bp_systolic"].value == "130"
        assert extracted["bp_diastolic"].value == "85"
        assert extracted["pulse"].value == "76"
        assert all(e.confidence_score == 0.7 for e in extracted.values())

    def test_slash_blood_pressure(self, extractor):
        extracted = _by_field(extractor.extract("Blood pressure 120/80 this morning"))
        assert extracted["bp_systolic"].value == "120"
        assert extracted["bp_diastolic"].value == "80"
        assert extracted["bp_systolic"].ai_source_text == "blood pressure 120/80"

    def test_heart_rate_keyword(self, extractor):
        assert _by_field(extractor.extract("Heart rate 88"))["pulse"].value == "88"

    def test_temperature_with_unit(self, extractor):
        extracted = _by_field(extractor.extract("Temperature 37.5°C"))
        assert extracted["temperature"].value == "37.5°C"

    def test_cantonese_keywords(self, extractor):
        extracted = _by_field(extractor.extract("血壓 140/90，脈搏 90"))
        assert extracted["bp_systolic"].value == "140"
        assert extracted["pulse"].value == "90"

    def test_pain_scale(self, extractor):
        pain = _by_field(extractor.extract("Pain is 7 out of 10 in the left knee"))["pain_scale"]
        assert pain.value == "7"
        assert pain.confidence_score == 0.6
        assert pain.section_id == "skin-pain"

    def test_number_does_not_cross_clause(self, extractor):
        assert "pain_scale" not in _by_field(extractor.extract("No pain. Pulse 76"))

    def test_nothing_recognised(self, extractor):
        assert extractor.extract("Patient resting comfortably, family visiting.") == []
