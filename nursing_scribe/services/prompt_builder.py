"""
RAG prompt construction.

The system prompt carries the retrieved field definitions (with their
similarity scores) and the extraction rules; the user prompt carries the
transcript.
"""

from __future__ import annotations

from dataclasses import dataclass

from nursing_scribe.schemas.extraction import ExtractionCandidate
from nursing_scribe.schemas.field import FieldDefinition
from nursing_scribe.services.embedding_index import render_medical_context
from nursing_scribe.services.field_catalog import FieldCatalog

MEDICAL_CONTEXT_PREVIEW_CHARS = 200

ENGLISH_FALL_TERMS = ("fell", "falling", "fall down", "tripped", "stumbled")
CANTONESE_FALL_TERMS = ("跌倒", "跌咗", "仆倒")
FALL_FREQUENCY_PHRASES = ("three times", "last week", "recently")


@dataclass(frozen=True)
class RagPrompt:
    system_prompt: str
    user_prompt: str


def _quoted(terms: tuple[str, ...]) -> str:
    return ", ".join(f'"{term}"' for term in terms)


def render_field_block(definition: FieldDefinition, similarity: float) -> str:
    """One retrieved field as shown to the model."""
    context = render_medical_context(definition)
    lines = [
        f"FIELD: {definition.field_id}",
        f"- Label: {definition.label}",
        f"- Section: {definition.section_id}",
        f"- Type: {definition.field_type.value}",
        f"- Synonyms: {', '.join(definition.synonyms)}",
    ]
    if definition.options:
        lines.append(f"- Options: {', '.join(definition.options)}")
    lines.extend([
        f"- Extraction Hints: {'. '.join(definition.extraction_hints)}",
        f"- Medical Context: {context[:MEDICAL_CONTEXT_PREVIEW_CHARS]}...",
        f"- RAG Similarity: {similarity * 100:.1f}%",
    ])
    return "\n".join(lines)


SYSTEM_PROMPT_TEMPLATE = """You are an expert medical AI assistant specializing in extracting comprehensive patient information from clinical conversation transcripts. You use RAG (Retrieval-Augmented Generation) to identify the most relevant medical fields for extraction.

RELEVANT MEDICAL FIELDS (Retrieved via RAG similarity search):
{field_mappings}

EXTRACTION STRATEGY:
1. FOCUS on the RAG-retrieved fields above - these are most relevant to the transcript content
2. PRIORITIZE fields with higher similarity scores (>80% = high confidence)
3. LOOK for exact synonyms and medical terminology from the field mappings
4. USE clinical reasoning to extract related fields when mentioned together
5. PRESERVE original language context while extracting structured data

CRITICAL EXTRACTION RULES:
1. Extract ALL relevant information mentioned in the transcript
2. Use EXACT field IDs from the RAG-retrieved mappings above
3. Match values to provided options when available (exact or closest match)
4. For numeric fields, extract exact values with appropriate units
5. Handle multilingual medical terminology (English, Cantonese, etc.)
6. Include confidence scores based on clarity and RAG similarity
7. Reference the exact text that supports each extraction
8. Do NOT extract a finding the patient explicitly denies (e.g. "denies falls", "no pain")

FALL HISTORY FOCUS:
Pay special attention to fall-related phrases in ANY language:
- English: {english_terms}
- Cantonese: {cantonese_terms}
- Any mention of frequency: {frequency_phrases}

For fall history, extract to morse_history_falling with value "Yes (25 points)" if ANY falls are mentioned.

RESPONSE FORMAT:
Return a JSON object with this exact structure:
{{
  "extractions": [
    {{
      "fieldId": "exact_field_id_from_rag_mapping",
      "sectionId": "section_id",
      "fieldLabel": "Human readable field name",
      "value": "extracted_value_matching_expected_format",
      "aiSourceText": "exact quote from transcript supporting this extraction",
      "confidenceScore": 0.95,
      "ragSimilarity": 0.87
    }}
  ]
}}

IMPORTANT: Return only valid JSON, no explanatory text."""

USER_PROMPT_TEMPLATE = """Analyze this clinical transcript and extract all relevant medical information using the RAG-retrieved field mappings above.

TRANSCRIPT TO ANALYZE:
"{transcript}"

Extract comprehensive patient assessment data following the RAG-enhanced field mapping guidelines. Focus especially on the fields with high similarity scores from the vector search."""


def build_rag_prompt(
    candidates: list[ExtractionCandidate],
    catalog: FieldCatalog,
    transcript_text: str,
) -> RagPrompt:
    """Render the system/user prompt pair for one transcript."""
    blocks = []
    for candidate in candidates:
        definition = catalog.lookup(candidate.field_id)
        if definition is None:
            continue
        blocks.append(render_field_block(definition, candidate.similarity))

    system_prompt = SYSTEM_PROMPT_TEMPLATE.format(
        field_mappings="\n\n".join(blocks) if blocks else "(no fields retrieved)",
        english_terms=_quoted(ENGLISH_FALL_TERMS),
        cantonese_terms=_quoted(CANTONESE_FALL_TERMS),
        frequency_phrases=_quoted(FALL_FREQUENCY_PHRASES),
    )
    user_prompt = USER_PROMPT_TEMPLATE.format(transcript=transcript_text)
    return RagPrompt(system_prompt=system_prompt, user_prompt=user_prompt)
