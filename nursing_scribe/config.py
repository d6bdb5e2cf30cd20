"""
Settings for the extraction service.

Read from the process environment, then `.env.local`. Only the OpenAI key
and the Supabase credentials have to be supplied; the RAG tuning knobs,
retention window and worker cadence all default to the production values.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class VectorSearchBackend(str, Enum):
    """Where field embeddings are stored and searched."""

    SUPABASE = "supabase"
    MEMORY = "memory"


class Settings(BaseSettings):
    """Environment-backed settings; see `.env.example` for the variable names."""

    model_config = SettingsConfigDict(
        env_file=".env.local",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Environment ──────────────────────────────────────────────
    environment: Environment = Environment.DEVELOPMENT

    # ── OpenAI ───────────────────────────────────────────────────
    openai_api_key: str = Field(default="", description="OpenAI API key for embeddings and extraction")
    openai_base_url: str = Field(default="https://api.openai.com/v1", description="OpenAI-compatible API base URL")
    embedding_model: str = Field(default="text-embedding-3-small", description="Model used for field and transcript embeddings")
    completion_model: str = Field(default="gpt-5-2025-08-07", description="Chat model used for field extraction")
    completion_max_tokens: int = Field(default=4000, ge=256, le=32000, description="Completion token budget")

    # ── Supabase ─────────────────────────────────────────────────
    supabase_url: str = Field(default="", description="Supabase project URL")
    supabase_service_key: str = Field(default="", description="Supabase service-role key")

    # ── Retrieval ────────────────────────────────────────────────
    vector_search_backend: VectorSearchBackend = Field(
        default=VectorSearchBackend.SUPABASE,
        description="Vector search backend for field embeddings",
    )
    rag_similarity_threshold: float = Field(default=0.6, ge=0.0, le=1.0, description="Minimum cosine similarity for a candidate field")
    rag_top_k: int = Field(default=20, ge=1, le=200, description="Maximum candidate fields per transcript")

    # ── Confidence ───────────────────────────────────────────────
    rag_confidence_cap: float = Field(default=0.95, ge=0.0, le=1.0, description="Upper bound for similarity-rescaled confidence")
    default_model_confidence: float = Field(default=0.8, ge=0.0, le=1.0, description="Confidence assumed when the model omits one")

    # ── Operational Limits ───────────────────────────────────────
    http_timeout_seconds: float = Field(default=30.0, gt=0, le=300, description="Timeout for every external HTTP call")
    transcript_retention_hours: int = Field(default=24, ge=1, le=24 * 30, description="Raw transcript retention window")
    worker_poll_interval_seconds: float = Field(default=10.0, gt=0, description="Transcript worker poll interval")
    worker_batch_size: int = Field(default=10, ge=1, le=500, description="Transcripts processed per worker pass")
    transcript_stale_after_seconds: float = Field(default=120.0, gt=0, description="Age before the worker takes over an unprocessed transcript")

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO", description="Root log level")

    # ── Helpers ──────────────────────────────────────────────────

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()
