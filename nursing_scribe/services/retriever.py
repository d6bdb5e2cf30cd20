"""
Similarity Retriever.

Embeds a transcript with the same embedding service that built the index
and returns the most similar catalog fields.
"""

from __future__ import annotations

from nursing_scribe.logging_config import get_logger
from nursing_scribe.schemas.extraction import ExtractionCandidate
from nursing_scribe.services.field_catalog import FieldCatalog
from nursing_scribe.services.interfaces import EmbeddingService, VectorSearchService

logger = get_logger(__name__)

DEFAULT_THRESHOLD = 0.6
DEFAULT_TOP_K = 20


class SimilarityRetriever:
    def __init__(
        self,
        catalog: FieldCatalog,
        embedder: EmbeddingService,
        search: VectorSearchService,
    ) -> None:
        self._catalog = catalog
        self._embedder = embedder
        self._search = search

    async def find_candidates(
        self,
        transcript_text: str,
        threshold: float = DEFAULT_THRESHOLD,
        top_k: int = DEFAULT_TOP_K,
    ) -> list[ExtractionCandidate]:
        """
        Return up to ``top_k`` catalog fields with similarity >= ``threshold``,
        best first.

        Raises:
            ValueError: threshold outside [0, 1] or top_k < 1.
            RetrievalError: the embedding or the search call failed.
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {threshold}")
        if top_k < 1:
            raise ValueError(f"top_k must be at least 1, got {top_k}")

        vector = await self._embedder.embed(transcript_text)
        results = await self._search.search(vector, threshold, top_k)

        candidates: list[ExtractionCandidate] = []
        seen: set[str] = set()
        for candidate in sorted(results, key=lambda c: c.similarity, reverse=True):
            if candidate.similarity < threshold or candidate.field_id in seen:
                continue
            if candidate.field_id not in self._catalog:
                logger.warning("retrieved_unknown_field", field_id=candidate.field_id)
                continue
            seen.add(candidate.field_id)
            candidates.append(candidate)
            if len(candidates) == top_k:
                break

        logger.info(
            "rag_candidates_found",
            count=len(candidates),
            threshold=threshold,
            top_k=top_k,
            best=candidates[0].similarity if candidates else None,
        )
        return candidates
