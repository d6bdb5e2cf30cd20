"""
Boundary contracts for the external collaborators of the pipeline.

Production implementations talk to OpenAI and Supabase; tests pass fakes
that satisfy the same protocols.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Protocol

from nursing_scribe.schemas.extraction import ExtractionCandidate
from nursing_scribe.schemas.field import FieldDefinition
from nursing_scribe.schemas.risk import RiskScore


class EmbeddingService(Protocol):
    async def embed(self, text: str) -> list[float]: ...


class VectorSearchService(Protocol):
    async def search(
        self, query_vector: list[float], threshold: float, top_k: int
    ) -> list[ExtractionCandidate]: ...


class EmbeddingStore(Protocol):
    async def clear(self) -> None: ...

    async def insert(
        self, definition: FieldDefinition, embedding: list[float], source_text: str
    ) -> None: ...

    async def publish(self) -> None: ...


class CompletionService(Protocol):
    async def complete(self, system_prompt: str, user_prompt: str) -> str: ...


class AssessmentStore(Protocol):
    async def ensure_assessment(self, assessment_id: str, user_id: Optional[str]) -> None: ...


class TranscriptStore(Protocol):
    async def insert_transcript(
        self,
        assessment_id: str,
        transcript_text: str,
        expires_at: datetime,
        user_id: Optional[str] = None,
    ) -> str: ...

    async def mark_processed(self, transcript_id: str) -> None: ...

    async def fetch_unprocessed(
        self, limit: int, created_before: datetime
    ) -> list[dict[str, Any]]: ...

    async def delete_expired(self, now: datetime) -> int: ...


class FieldValueStore(Protocol):
    async def upsert_field_value(
        self,
        assessment_id: str,
        field_id: str,
        section_id: str,
        field_label: str,
        value: str,
        ai_source_text: str,
        data_source: str = "ai-filled",
    ) -> None: ...


class RiskScoreStore(Protocol):
    async def upsert_risk_scores(self, assessment_id: str, scores: list[RiskScore]) -> None: ...
