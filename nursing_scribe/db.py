"""
Supabase Database Client.

Wraps the official Supabase Python client with typed helpers for the
tables the scribe reads and writes: field embeddings, assessment rows,
raw transcripts, AI-filled form field values and risk scores.

One instance is created per process by the service context and handed to
every component that needs it.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from supabase import Client, ClientOptions, create_client

from nursing_scribe.config import Settings
from nursing_scribe.errors import PersistenceError
from nursing_scribe.logging_config import get_logger
from nursing_scribe.schemas.field import FieldDefinition
from nursing_scribe.schemas.risk import RiskScore

logger = get_logger(__name__)

# Matches every row; PostgREST refuses unfiltered deletes
_NIL_UUID = "00000000-0000-0000-0000-000000000000"


class DatabaseClient:
    """Wrapper around the official Supabase Python client."""

    def __init__(self, settings: Settings, client: Optional[Client] = None) -> None:
        if client is not None:
            self._client = client
            return

        if not settings.supabase_url or not settings.supabase_service_key:
            logger.warning(
                "Supabase credentials missing. Database operations will fail.",
                url=bool(settings.supabase_url),
                key=bool(settings.supabase_service_key),
            )

        try:
            self._client = create_client(
                settings.supabase_url,
                settings.supabase_service_key,
                options=ClientOptions(postgrest_client_timeout=settings.http_timeout_seconds),
            )
            logger.info("Supabase client initialized", url=settings.supabase_url)
        except Exception as e:
            logger.error("Failed to initialize Supabase client", error=str(e))
            raise

    @property
    def client(self) -> Client:
        """Access the raw Supabase client."""
        return self._client

    # -- Field embeddings --

    async def clear(self) -> None:
        """Delete every stored field embedding."""
        try:
            self.client.table("field_embeddings").delete().neq("id", _NIL_UUID).execute()
        except Exception as e:
            logger.error("Error clearing field embeddings", error=str(e))
            raise PersistenceError(f"Could not clear field embeddings: {e}") from e

    async def insert(
        self, definition: FieldDefinition, embedding: list[float], source_text: str
    ) -> None:
        """Store one field's embedding together with its catalog metadata."""
        payload = {
            "field_id": definition.field_id,
            "section_id": definition.section_id,
            "field_label": definition.label,
            "field_type": definition.field_type.value,
            "synonyms": list(definition.synonyms),
            "options": list(definition.options) if definition.options else None,
            "extraction_hints": list(definition.extraction_hints),
            "medical_context": source_text,
            "embedding": embedding,
        }
        try:
            self.client.table("field_embeddings").insert(payload).execute()
        except Exception as e:
            logger.error("Error inserting field embedding", field_id=definition.field_id, error=str(e))
            raise PersistenceError(f"Could not store embedding for {definition.field_id}: {e}") from e

    async def publish(self) -> None:
        """Rows are visible as soon as they are inserted; nothing to swap."""

    # -- Assessments --

    async def ensure_assessment(self, assessment_id: str, user_id: Optional[str] = None) -> None:
        """Create the patient_assessments row if it does not exist yet."""
        try:
            existing = (
                self.client.table("patient_assessments")
                .select("id")
                .eq("id", assessment_id)
                .limit(1)
                .execute()
            )
            if existing.data:
                return
            payload: dict[str, Any] = {"id": assessment_id}
            if user_id:
                payload["user_id"] = user_id
            self.client.table("patient_assessments").insert(payload).execute()
            logger.info("patient_assessment_created", assessment_id=assessment_id)
        except Exception as e:
            logger.error("Error ensuring patient assessment", assessment_id=assessment_id, error=str(e))

    # -- Transcripts --

    async def insert_transcript(
        self,
        assessment_id: str,
        transcript_text: str,
        expires_at: datetime,
        user_id: Optional[str] = None,
    ) -> str:
        """Store a raw transcript as unprocessed and return its id."""
        payload: dict[str, Any] = {
            "assessment_id": assessment_id,
            "transcript_text": transcript_text,
            "processed": False,
            "expires_at": expires_at.isoformat(),
        }
        if user_id:
            payload["user_id"] = user_id
        try:
            response = self.client.table("audio_transcripts").insert(payload).execute()
        except Exception as e:
            logger.error("Error inserting transcript", assessment_id=assessment_id, error=str(e))
            raise PersistenceError(f"Could not store transcript: {e}") from e
        if not response.data:
            raise PersistenceError("Transcript insert returned no row")
        return str(response.data[0]["id"])

    async def mark_processed(self, transcript_id: str) -> None:
        try:
            (
                self.client.table("audio_transcripts")
                .update({"processed": True})
                .eq("id", transcript_id)
                .execute()
            )
        except Exception as e:
            logger.error("Error updating transcript", transcript_id=transcript_id, error=str(e))
            raise PersistenceError(f"Could not mark transcript {transcript_id} processed: {e}") from e

    async def fetch_unprocessed(
        self, limit: int, created_before: datetime
    ) -> list[dict[str, Any]]:
        """Oldest unprocessed transcripts created before ``created_before``."""
        try:
            response = (
                self.client.table("audio_transcripts")
                .select("id, assessment_id, user_id, transcript_text")
                .eq("processed", False)
                .lt("created_at", created_before.isoformat())
                .order("created_at", desc=False)
                .limit(limit)
                .execute()
            )
            return response.data or []
        except Exception as e:
            logger.error("Error fetching unprocessed transcripts", error=str(e))
            return []

    async def delete_expired(self, now: datetime) -> int:
        """Delete transcripts past their retention window; returns the count removed."""
        try:
            response = (
                self.client.table("audio_transcripts")
                .delete()
                .lt("expires_at", now.isoformat())
                .execute()
            )
            return len(response.data or [])
        except Exception as e:
            logger.error("Error purging expired transcripts", error=str(e))
            raise PersistenceError(f"Could not purge transcripts: {e}") from e

    # -- Form field values --

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
        """Write one field value keyed by (assessment_id, field_id)."""
        payload = {
            "assessment_id": assessment_id,
            "field_id": field_id,
            "section_id": section_id,
            "field_label": field_label,
            "value": value,
            "data_source": data_source,
            "ai_source_text": ai_source_text,
        }
        try:
            (
                self.client.table("form_field_values")
                .upsert(payload, on_conflict="assessment_id,field_id")
                .execute()
            )
        except Exception as e:
            logger.error("Error upserting field", field_id=field_id, error=str(e))
            raise PersistenceError(f"Could not upsert {field_id}: {e}") from e

    # -- Risk scores --

    async def upsert_risk_scores(self, assessment_id: str, scores: list[RiskScore]) -> None:
        rows = [
            {"assessment_id": assessment_id, **score.model_dump(mode="json")}
            for score in scores
        ]
        if not rows:
            return
        try:
            (
                self.client.table("risk_scores")
                .upsert(rows, on_conflict="assessment_id,score_name")
                .execute()
            )
        except Exception as e:
            logger.error("Error upserting risk scores", assessment_id=assessment_id, error=str(e))
            raise PersistenceError(f"Could not upsert risk scores: {e}") from e
