# tests/conftest.py
"""
Pytest configuration and fixtures for nursing_scribe tests.

Provides:
- A keyword-bag embedder, a canned vector search and a scripted completion
  service standing in for OpenAI / Supabase
- An in-memory store implementing the assessment, transcript, field value
  and risk score store protocols
- The default field catalog, validator and a fully wired service context

Async services are driven with ``asyncio.run`` inside plain test functions.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Optional, Union

import pytest

from nursing_scribe.config import Settings
from nursing_scribe.errors import PersistenceError, RetrievalError
from nursing_scribe.schemas.extraction import ExtractionCandidate
from nursing_scribe.schemas.risk import RiskScore
from nursing_scribe.services.context import ScribeContext, assemble_context
from nursing_scribe.services.field_catalog import FieldCatalog, get_catalog
from nursing_scribe.services.field_validator import FieldValidator
from nursing_scribe.services.vector_search import InMemoryVectorSearch


END_TO_END_TRANSCRIPT = "Patient's temp is 38.2, BP 130 over 85, pulse 76, denies falls."


# =============================================================================
# FAKE EXTERNAL SERVICES
# =============================================================================

EMBEDDING_KEYWORDS = (
    "temp", "fever", "pulse", "heart rate", "bp", "blood pressure",
    "systolic", "diastolic", "pain", "fall", "fell", "respiratory",
    "oxygen", "phone", "cane", "walker",
)


class FakeEmbedder:
    """Bag-of-keywords vectors; the leading bias keeps every vector non-zero."""

    def __init__(self, fail: bool = False, fail_on: Optional[str] = None) -> None:
        self.fail = fail
        self.fail_on = fail_on
        self.calls: list[str] = []

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        if self.fail or (self.fail_on and self.fail_on in text):
            raise RetrievalError("embedding service unavailable")
        lowered = text.lower()
        return [1.0] + [float(lowered.count(keyword)) for keyword in EMBEDDING_KEYWORDS]


class FakeVectorSearch:
    """Returns a fixed candidate list and records every query."""

    def __init__(
        self,
        candidates: Optional[list[ExtractionCandidate]] = None,
        fail: bool = False,
    ) -> None:
        self.candidates = candidates or []
        self.fail = fail
        self.queries: list[tuple[float, int]] = []

    async def search(
        self, query_vector: list[float], threshold: float, top_k: int
    ) -> list[ExtractionCandidate]:
        self.queries.append((threshold, top_k))
        if self.fail:
            raise RetrievalError("search_similar_fields timed out")
        return list(self.candidates)


class FakeCompletion:
    """Replies with a canned payload, or raises the given exception."""

    def __init__(self, reply: Union[str, list, dict, Exception] = "[]") -> None:
        self.reply = reply
        self.prompts: list[tuple[str, str]] = []

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        self.prompts.append((system_prompt, user_prompt))
        if isinstance(self.reply, Exception):
            raise self.reply
        if isinstance(self.reply, str):
            return self.reply
        return json.dumps(self.reply)


class MemoryStore:
    """In-memory stand-in for the Supabase tables the processor writes."""

    def __init__(
        self,
        fail_fields: tuple[str, ...] = (),
        fail_transcript_insert: bool = False,
        fail_risk_scores: bool = False,
        fail_mark_processed: bool = False,
    ) -> None:
        self.fail_fields = set(fail_fields)
        self.fail_transcript_insert = fail_transcript_insert
        self.fail_risk_scores = fail_risk_scores
        self.fail_mark_processed = fail_mark_processed
        self.assessments: set[str] = set()
        self.transcripts: dict[str, dict[str, Any]] = {}
        self.field_values: dict[tuple[str, str], dict[str, Any]] = {}
        self.risk_scores: dict[tuple[str, str], RiskScore] = {}

    async def ensure_assessment(self, assessment_id: str, user_id: Optional[str] = None) -> None:
        self.assessments.add(assessment_id)

    async def insert_transcript(
        self,
        assessment_id: str,
        transcript_text: str,
        expires_at: datetime,
        user_id: Optional[str] = None,
    ) -> str:
        if self.fail_transcript_insert:
            raise PersistenceError("audio_transcripts insert rejected")
        transcript_id = f"t-{len(self.transcripts) + 1}"
        self.transcripts[transcript_id] = {
            "id": transcript_id,
            "assessment_id": assessment_id,
            "transcript_text": transcript_text,
            "user_id": user_id,
            "processed": False,
            "expires_at": expires_at,
            "created_at": datetime.now(timezone.utc),
        }
        return transcript_id

    async def mark_processed(self, transcript_id: str) -> None:
        if self.fail_mark_processed:
            raise PersistenceError("audio_transcripts update rejected")
        self.transcripts[transcript_id]["processed"] = True

    async def fetch_unprocessed(
        self, limit: int, created_before: datetime
    ) -> list[dict[str, Any]]:
        rows = [
            row for row in self.transcripts.values()
            if not row["processed"] and row["created_at"] < created_before
        ]
        return rows[:limit]

    async def delete_expired(self, now: datetime) -> int:
        expired = [tid for tid, row in self.transcripts.items() if row["expires_at"] < now]
        for tid in expired:
            del self.transcripts[tid]
        return len(expired)

    async def upsert_field_value(
        self,
        assessment_id: str,
        field_id: str,
        section_id: str,
        field_label: str,
        value: str,
        ai_source_text: str,
        data_source: str = "ai-filled",
    ) -> None:
        if field_id in self.fail_fields:
            raise PersistenceError(f"Could not upsert {field_id}")
        self.field_values[(assessment_id, field_id)] = {
            "section_id": section_id,
            "field_label": field_label,
            "value": value,
            "ai_source_text": ai_source_text,
            "data_source": data_source,
        }

    async def upsert_risk_scores(self, assessment_id: str, scores: list[RiskScore]) -> None:
        if self.fail_risk_scores:
            raise PersistenceError("risk_scores upsert rejected")
        for score in scores:
            self.risk_scores[(assessment_id, score.score_name)] = score


def candidate(field_id: str, similarity: float) -> ExtractionCandidate:
    return ExtractionCandidate(field_id=field_id, similarity=similarity)


def model_item(field_id: str, value: str, section_id: str = "physical", **extra: Any) -> dict[str, Any]:
    return {"fieldId": field_id, "sectionId": section_id, "value": value, **extra}


# =============================================================================
# CORE FIXTURES
# =============================================================================

@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, openai_api_key="test-key")


@pytest.fixture
def catalog() -> FieldCatalog:
    return get_catalog()


@pytest.fixture
def validator(catalog: FieldCatalog) -> FieldValidator:
    return FieldValidator(catalog)


@pytest.fixture
def embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture
def memory_search() -> InMemoryVectorSearch:
    return InMemoryVectorSearch()


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def vitals_candidates() -> list[ExtractionCandidate]:
    return [
        candidate("temperature", 0.9),
        candidate("bp_systolic", 0.8),
        candidate("bp_diastolic", 0.8),
        candidate("pulse", 0.75),
    ]


def build_test_context(
    settings: Settings,
    catalog: FieldCatalog,
    completion: FakeCompletion,
    search: Optional[FakeVectorSearch] = None,
    store: Optional[MemoryStore] = None,
    embedder: Optional[FakeEmbedder] = None,
) -> ScribeContext:
    memory = InMemoryVectorSearch()
    return assemble_context(
        settings,
        catalog,
        embedder=embedder or FakeEmbedder(),
        completion=completion,
        search=search or FakeVectorSearch(),
        embedding_store=memory,
        store=store or MemoryStore(),
    )


@pytest.fixture
def context_factory(settings: Settings, catalog: FieldCatalog):
    """Build a wired context from fakes: ``context_factory(completion, search=..., store=...)``."""

    def factory(completion: FakeCompletion, **kwargs: Any) -> ScribeContext:
        return build_test_context(settings, catalog, completion, **kwargs)

    return factory


