"""
Extraction Orchestrator.

Runs a chain of extraction strategies over a transcript and returns the
first answer. The RAG strategy retrieves candidate fields, prompts the
model and rescales its confidence by retrieval similarity; the regex
strategy is the last link and always answers.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from pydantic import ValidationError

from nursing_scribe.errors import (
    CompletionError,
    ExtractionStrategyError,
    ResponseParseError,
    RetrievalError,
)
from nursing_scribe.logging_config import get_logger, preview_text
from nursing_scribe.schemas.extraction import (
    ExtractionCandidate,
    ExtractionOutcome,
    ExtractionStrategyName,
    FieldExtraction,
)
from nursing_scribe.services.fallback_extraction import RegexFallbackExtractor
from nursing_scribe.services.field_catalog import FieldCatalog
from nursing_scribe.services.interfaces import CompletionService
from nursing_scribe.services.prompt_builder import build_rag_prompt
from nursing_scribe.services.response_parser import parse_model_response
from nursing_scribe.services.retriever import (
    DEFAULT_THRESHOLD,
    DEFAULT_TOP_K,
    SimilarityRetriever,
)

logger = get_logger(__name__)

DEFAULT_SOURCE_TEXT = "Extracted from transcript using RAG"
DEFAULT_MODEL_CONFIDENCE = 0.8
CONFIDENCE_CAP = 0.95

_REQUIRED_KEYS = ("fieldId", "sectionId", "value")


class ExtractionStrategy(Protocol):
    name: ExtractionStrategyName

    async def extract(self, transcript_text: str) -> ExtractionOutcome: ...


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def rescale_confidence(
    confidence: float,
    similarity: Optional[float],
    cap: float = CONFIDENCE_CAP,
) -> float:
    """
    Weight the model's confidence by retrieval similarity.

    Fields the model returned without them having been retrieved keep the
    model's score unchanged.
    """
    if similarity is None:
        return confidence
    return min(cap, confidence * similarity)


def coerce_extractions(
    items: list[dict[str, Any]],
    candidates: Sequence[ExtractionCandidate],
    default_confidence: float = DEFAULT_MODEL_CONFIDENCE,
    cap: float = CONFIDENCE_CAP,
) -> list[FieldExtraction]:
    """
    Turn raw model items into extractions.

    Items missing an id, section or value are dropped. Repeated field ids
    keep the last occurrence.
    """
    similarity_by_field = {c.field_id: c.similarity for c in candidates}
    by_field: dict[str, FieldExtraction] = {}

    for item in items:
        if any(_is_missing(item.get(key)) for key in _REQUIRED_KEYS):
            logger.debug("model_item_dropped", keys=sorted(item.keys()))
            continue

        field_id = _as_text(item["fieldId"])
        raw_confidence = item.get("confidenceScore")
        try:
            confidence = float(raw_confidence) if raw_confidence is not None else default_confidence
        except (TypeError, ValueError):
            confidence = default_confidence
        confidence = max(0.0, min(1.0, confidence))

        source_text = item.get("aiSourceText")
        try:
            extraction = FieldExtraction(
                field_id=field_id,
                section_id=_as_text(item["sectionId"]),
                field_label=_as_text(item.get("fieldLabel") or ""),
                value=_as_text(item["value"]),
                ai_source_text=_as_text(source_text) if source_text else DEFAULT_SOURCE_TEXT,
                confidence_score=rescale_confidence(
                    confidence, similarity_by_field.get(field_id), cap
                ),
            )
        except ValidationError as e:
            logger.warning("model_item_invalid", field_id=field_id, error=str(e))
            continue

        by_field.pop(field_id, None)
        by_field[field_id] = extraction

    return list(by_field.values())


class RagExtractionStrategy:
    """Retrieve candidate fields, prompt the model, decode its answer."""

    name = ExtractionStrategyName.RAG

    def __init__(
        self,
        catalog: FieldCatalog,
        retriever: SimilarityRetriever,
        completion: CompletionService,
        threshold: float = DEFAULT_THRESHOLD,
        top_k: int = DEFAULT_TOP_K,
        default_confidence: float = DEFAULT_MODEL_CONFIDENCE,
        confidence_cap: float = CONFIDENCE_CAP,
    ) -> None:
        self._catalog = catalog
        self._retriever = retriever
        self._completion = completion
        self._threshold = threshold
        self._top_k = top_k
        self._default_confidence = default_confidence
        self._confidence_cap = confidence_cap

    async def extract(self, transcript_text: str) -> ExtractionOutcome:
        try:
            candidates = await self._retriever.find_candidates(
                transcript_text, self._threshold, self._top_k
            )
        except RetrievalError as e:
            logger.warning("rag_search_failed", error=str(e))
            raise ExtractionStrategyError(f"Retrieval failed: {e}") from e

        if not candidates:
            logger.info("rag_no_candidates")

        prompt = build_rag_prompt(candidates, self._catalog, transcript_text)

        try:
            content = await self._completion.complete(prompt.system_prompt, prompt.user_prompt)
            items = parse_model_response(content)
        except CompletionError as e:
            logger.warning("model_call_failed", error=str(e))
            raise ExtractionStrategyError(f"Model call failed: {e}") from e
        except ResponseParseError as e:
            logger.warning("model_response_unparseable", error=str(e))
            raise ExtractionStrategyError(str(e)) from e

        extractions = coerce_extractions(
            items, candidates, self._default_confidence, self._confidence_cap
        )
        logger.info(
            "rag_extraction_complete",
            candidates=len(candidates),
            items=len(items),
            fields_extracted=len(extractions),
        )
        return ExtractionOutcome(
            extractions=extractions,
            strategy=self.name,
            candidates=candidates,
        )


class RegexFallbackStrategy:
    """Last link of the chain; never raises for string input."""

    name = ExtractionStrategyName.FALLBACK

    def __init__(self, extractor: RegexFallbackExtractor) -> None:
        self._extractor = extractor

    async def extract(self, transcript_text: str) -> ExtractionOutcome:
        return ExtractionOutcome(
            extractions=self._extractor.extract(transcript_text),
            strategy=self.name,
        )


class ExtractionOrchestrator:
    def __init__(self, strategies: Sequence[ExtractionStrategy]) -> None:
        if not strategies:
            raise ValueError("At least one extraction strategy is required")
        self._strategies = tuple(strategies)

    @classmethod
    def with_fallback(
        cls,
        catalog: FieldCatalog,
        retriever: SimilarityRetriever,
        completion: CompletionService,
        **rag_options: Any,
    ) -> "ExtractionOrchestrator":
        """The standard chain: RAG first, regex when RAG cannot answer."""
        return cls([
            RagExtractionStrategy(catalog, retriever, completion, **rag_options),
            RegexFallbackStrategy(RegexFallbackExtractor(catalog)),
        ])

    async def extract_with_outcome(self, transcript_text: str) -> ExtractionOutcome:
        """Run the chain; the outcome records which strategy answered."""
        logger.info("extraction_started", transcript_length=len(transcript_text))
        logger.debug("transcript_preview", text=preview_text(transcript_text))

        last_error: Optional[ExtractionStrategyError] = None
        for strategy in self._strategies:
            try:
                outcome = await strategy.extract(transcript_text)
            except ExtractionStrategyError as e:
                logger.warning("extraction_strategy_failed", strategy=strategy.name.value, error=str(e))
                last_error = e
                continue
            logger.info(
                "extraction_complete",
                strategy=outcome.strategy.value,
                fields_extracted=len(outcome.extractions),
            )
            return outcome

        raise last_error

    async def extract(self, transcript_text: str) -> list[FieldExtraction]:
        outcome = await self.extract_with_outcome(transcript_text)
        return outcome.extractions
