"""
Service context.

Holds the settings, the field catalog and every external collaborator for
one process. Built once at startup by the API lifespan, the worker or a
script, and passed explicitly to whatever needs it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional

from nursing_scribe.config import Settings, VectorSearchBackend, get_settings
from nursing_scribe.db import DatabaseClient
from nursing_scribe.logging_config import get_logger
from nursing_scribe.services.embedding_index import EmbeddingIndexBuilder
from nursing_scribe.services.extraction import ExtractionOrchestrator
from nursing_scribe.services.field_catalog import FieldCatalog, get_catalog
from nursing_scribe.services.field_validator import FieldValidator
from nursing_scribe.services.interfaces import (
    CompletionService,
    EmbeddingService,
    EmbeddingStore,
    VectorSearchService,
)
from nursing_scribe.services.openai_client import OpenAIClient
from nursing_scribe.services.retriever import SimilarityRetriever
from nursing_scribe.services.transcript_processing import TranscriptProcessor
from nursing_scribe.services.vector_search import InMemoryVectorSearch, SupabaseVectorSearch

logger = get_logger(__name__)


@dataclass
class ScribeContext:
    settings: Settings
    catalog: FieldCatalog
    index_builder: EmbeddingIndexBuilder
    retriever: SimilarityRetriever
    orchestrator: ExtractionOrchestrator
    validator: FieldValidator
    processor: TranscriptProcessor
    closers: list[Callable[[], Awaitable[None]]] = field(default_factory=list)

    async def close(self) -> None:
        for closer in self.closers:
            await closer()
        logger.info("scribe_context_closed")


def assemble_context(
    settings: Settings,
    catalog: FieldCatalog,
    embedder: EmbeddingService,
    completion: CompletionService,
    search: VectorSearchService,
    embedding_store: EmbeddingStore,
    store: Any,
    closers: Optional[list[Callable[[], Awaitable[None]]]] = None,
) -> ScribeContext:
    """
    Wire the pipeline from its collaborators.

    ``store`` must provide the assessment, transcript, field value and risk
    score store protocols (``DatabaseClient`` does).
    """
    retriever = SimilarityRetriever(catalog, embedder, search)
    orchestrator = ExtractionOrchestrator.with_fallback(
        catalog,
        retriever,
        completion,
        threshold=settings.rag_similarity_threshold,
        top_k=settings.rag_top_k,
        default_confidence=settings.default_model_confidence,
        confidence_cap=settings.rag_confidence_cap,
    )
    validator = FieldValidator(catalog)
    processor = TranscriptProcessor(
        orchestrator,
        validator,
        assessments=store,
        transcripts=store,
        field_values=store,
        risk_scores=store,
        retention_hours=settings.transcript_retention_hours,
        batch_size=settings.worker_batch_size,
        stale_after_seconds=settings.transcript_stale_after_seconds,
    )
    return ScribeContext(
        settings=settings,
        catalog=catalog,
        index_builder=EmbeddingIndexBuilder(catalog, embedder, embedding_store),
        retriever=retriever,
        orchestrator=orchestrator,
        validator=validator,
        processor=processor,
        closers=list(closers or []),
    )


def build_context(settings: Optional[Settings] = None) -> ScribeContext:
    """Production wiring: OpenAI over httpx, Supabase for persistence."""
    settings = settings or get_settings()
    catalog = get_catalog()
    openai = OpenAIClient(settings)
    db = DatabaseClient(settings)

    search: VectorSearchService
    embedding_store: EmbeddingStore
    if settings.vector_search_backend == VectorSearchBackend.MEMORY:
        memory = InMemoryVectorSearch()
        search, embedding_store = memory, memory
    else:
        search, embedding_store = SupabaseVectorSearch(db), db

    logger.info(
        "scribe_context_built",
        fields=len(catalog),
        vector_search_backend=settings.vector_search_backend.value,
        embedding_model=settings.embedding_model,
        completion_model=settings.completion_model,
    )
    return assemble_context(
        settings,
        catalog,
        embedder=openai,
        completion=openai,
        search=search,
        embedding_store=embedding_store,
        store=db,
        closers=[openai.close],
    )
