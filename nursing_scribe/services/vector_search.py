"""
Vector search over field embeddings.

``SupabaseVectorSearch`` delegates to the ``search_similar_fields`` RPC
(pgvector cosine distance). ``InMemoryVectorSearch`` keeps the index in
process and doubles as its own embedding store, for local runs and tests.
"""

from __future__ import annotations

import asyncio
import math
from typing import Sequence

from nursing_scribe.db import DatabaseClient
from nursing_scribe.errors import RetrievalError
from nursing_scribe.logging_config import get_logger
from nursing_scribe.schemas.extraction import ExtractionCandidate
from nursing_scribe.schemas.field import FieldDefinition, FieldEmbedding

logger = get_logger(__name__)


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    if len(vec_a) != len(vec_b):
        raise ValueError(f"Dimension mismatch: {len(vec_a)} != {len(vec_b)}")
    dot = sum(a * b for a, b in zip(vec_a, vec_b))
    norm_a = math.sqrt(sum(a * a for a in vec_a))
    norm_b = math.sqrt(sum(b * b for b in vec_b))
    if not norm_a or not norm_b:
        return 0.0
    return dot / (norm_a * norm_b)


def _clamp(similarity: float) -> float:
    return max(0.0, min(1.0, similarity))


def rank_candidates(
    scored: list[tuple[str, float]], threshold: float, top_k: int
) -> list[ExtractionCandidate]:
    """Keep scores at or above ``threshold``, best first, at most ``top_k``."""
    kept = [(field_id, score) for field_id, score in scored if score >= threshold]
    kept.sort(key=lambda pair: pair[1], reverse=True)
    return [
        ExtractionCandidate(field_id=field_id, similarity=_clamp(score))
        for field_id, score in kept[:top_k]
    ]


class SupabaseVectorSearch:
    """Nearest-neighbour search via the ``search_similar_fields`` database function."""

    def __init__(self, db: DatabaseClient) -> None:
        self._db = db

    async def search(
        self, query_vector: list[float], threshold: float, top_k: int
    ) -> list[ExtractionCandidate]:
        try:
            response = self._db.client.rpc(
                "search_similar_fields",
                {
                    "query_embedding": query_vector,
                    "similarity_threshold": threshold,
                    "match_count": top_k,
                },
            ).execute()
        except Exception as e:
            logger.error("vector_search_error", error=str(e))
            raise RetrievalError(f"Vector search failed: {e}") from e

        try:
            scored = [
                (str(row["field_id"]), float(row.get("similarity", 0.0)))
                for row in (response.data or [])
                if row.get("field_id")
            ]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error("vector_search_malformed_rows", error=str(e))
            raise RetrievalError(f"Malformed vector search response: {e}") from e
        return rank_candidates(scored, threshold, top_k)


class InMemoryVectorSearch:
    """
    Process-local embedding index.

    Rebuilds swap the whole index in one assignment so readers never see
    a half-filled index: ``clear`` starts a staging area, ``insert`` fills
    it, and ``publish`` makes it visible.
    """

    def __init__(self) -> None:
        self._index: dict[str, FieldEmbedding] = {}
        self._staging: dict[str, FieldEmbedding] | None = None
        self._lock = asyncio.Lock()

    @property
    def field_ids(self) -> set[str]:
        return set(self._index)

    def get(self, field_id: str) -> FieldEmbedding | None:
        return self._index.get(field_id)

    async def clear(self) -> None:
        async with self._lock:
            self._staging = {}

    async def insert(
        self, definition: FieldDefinition, embedding: list[float], source_text: str
    ) -> None:
        async with self._lock:
            target = self._staging if self._staging is not None else self._index
            target[definition.field_id] = FieldEmbedding(
                field_id=definition.field_id,
                embedding=list(embedding),
                source_text=source_text,
            )

    async def publish(self) -> None:
        async with self._lock:
            if self._staging is not None:
                self._index = self._staging
                self._staging = None

    async def search(
        self, query_vector: list[float], threshold: float, top_k: int
    ) -> list[ExtractionCandidate]:
        index = self._index
        try:
            scored = [
                (field_id, cosine_similarity(query_vector, stored.embedding))
                for field_id, stored in index.items()
            ]
        except ValueError as e:
            raise RetrievalError(str(e)) from e
        return rank_candidates(scored, threshold, top_k)
