"""
Transcript Processor.

The end-to-end use case: store a raw transcript, extract field values from
it, validate them, write the valid ones onto the patient's assessment form
with ``ai-filled`` provenance and derive risk scores. Only a missing
assessment id or transcript crosses this boundary as an exception; every
downstream failure degrades to the fallback path or a log entry.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from nursing_scribe.errors import PersistenceError
from nursing_scribe.logging_config import get_logger, transcript_id_var
from nursing_scribe.schemas.extraction import FieldExtraction
from nursing_scribe.schemas.transcript import EMPTY_RESULT_MESSAGE, TranscriptResult
from nursing_scribe.schemas.validation import FieldValidation
from nursing_scribe.services.extraction import ExtractionOrchestrator
from nursing_scribe.services.field_validator import FieldValidator
from nursing_scribe.services.interfaces import (
    AssessmentStore,
    FieldValueStore,
    RiskScoreStore,
    TranscriptStore,
)
from nursing_scribe.services.risk_scores import compute_risk_scores

logger = get_logger(__name__)

AI_FILLED = "ai-filled"


class TranscriptProcessor:
    def __init__(
        self,
        orchestrator: ExtractionOrchestrator,
        validator: FieldValidator,
        assessments: AssessmentStore,
        transcripts: TranscriptStore,
        field_values: FieldValueStore,
        risk_scores: RiskScoreStore,
        retention_hours: int = 24,
        batch_size: int = 10,
        stale_after_seconds: float = 120.0,
    ) -> None:
        self._orchestrator = orchestrator
        self._validator = validator
        self._assessments = assessments
        self._transcripts = transcripts
        self._field_values = field_values
        self._risk_scores = risk_scores
        self._retention = timedelta(hours=retention_hours)
        self._batch_size = batch_size
        self._stale_after = timedelta(seconds=stale_after_seconds)

    async def process(
        self,
        assessment_id: str,
        transcript_text: str,
        user_id: Optional[str] = None,
    ) -> TranscriptResult:
        """
        Store, extract, validate and persist one transcript.

        Raises:
            ValueError: assessment_id or transcript_text is missing or blank.
        """
        if not assessment_id or not assessment_id.strip():
            raise ValueError("Missing required field: assessmentId")
        if not transcript_text or not transcript_text.strip():
            raise ValueError("Missing required field: transcriptText")

        logger.info(
            "transcript_received",
            assessment_id=assessment_id,
            transcript_length=len(transcript_text),
        )

        try:
            await self._assessments.ensure_assessment(assessment_id, user_id)
        except PersistenceError as e:
            logger.error("ensure_assessment_failed", assessment_id=assessment_id, error=str(e))

        transcript_id: Optional[str] = None
        try:
            transcript_id = await self._transcripts.insert_transcript(
                assessment_id,
                transcript_text,
                datetime.now(timezone.utc) + self._retention,
                user_id,
            )
        except PersistenceError as e:
            logger.error("transcript_store_failed", assessment_id=assessment_id, error=str(e))

        return await self._run(assessment_id, transcript_text, transcript_id)

    async def _run(
        self,
        assessment_id: str,
        transcript_text: str,
        transcript_id: Optional[str],
    ) -> TranscriptResult:
        token = transcript_id_var.set(transcript_id or "")
        try:
            outcome = await self._orchestrator.extract_with_outcome(transcript_text)
            validations = self._validator.validate_batch(outcome.extractions)
            summary = self._validator.summarize(validations)

            persisted = await self._persist(assessment_id, outcome.extractions, validations)

            if transcript_id:
                try:
                    await self._transcripts.mark_processed(transcript_id)
                except PersistenceError as e:
                    logger.error("mark_processed_failed", error=str(e))

            risk_scores = compute_risk_scores(validations)
            if risk_scores:
                try:
                    await self._risk_scores.upsert_risk_scores(assessment_id, risk_scores)
                except PersistenceError as e:
                    logger.error("risk_scores_store_failed", assessment_id=assessment_id, error=str(e))

            logger.info(
                "transcript_processed",
                assessment_id=assessment_id,
                strategy=outcome.strategy.value,
                fields_extracted=len(outcome.extractions),
                fields_persisted=persisted,
                fields_with_errors=summary.fields_with_errors,
            )

            return TranscriptResult(
                transcript_id=transcript_id,
                assessment_id=assessment_id,
                strategy=outcome.strategy,
                extractions=outcome.extractions,
                validations=validations,
                summary=summary,
                persisted_fields=persisted,
                risk_scores=risk_scores,
                message=None if outcome.extractions else EMPTY_RESULT_MESSAGE,
            )
        finally:
            transcript_id_var.reset(token)

    async def _persist(
        self,
        assessment_id: str,
        extractions: list[FieldExtraction],
        validations: list[FieldValidation],
    ) -> int:
        """Write every valid value; returns how many rows were written."""
        persisted = 0
        for extraction, checked in zip(extractions, validations):
            if not checked.validation.is_valid:
                logger.info(
                    "field_not_persisted",
                    field_id=extraction.field_id,
                    errors=checked.validation.errors,
                )
                continue
            try:
                await self._field_values.upsert_field_value(
                    assessment_id=assessment_id,
                    field_id=extraction.field_id,
                    section_id=extraction.section_id,
                    field_label=extraction.field_label,
                    value=checked.validation.normalized_value,
                    ai_source_text=extraction.ai_source_text,
                    data_source=AI_FILLED,
                )
            except PersistenceError as e:
                logger.error("field_upsert_failed", field_id=extraction.field_id, error=str(e))
                continue
            persisted += 1
        return persisted

    async def process_pending(
        self, limit: Optional[int] = None, now: Optional[datetime] = None
    ) -> int:
        """
        Process stored transcripts still marked unprocessed; returns how many.

        Rows younger than the stale window belong to a request that is still
        running its own pipeline and are left alone.
        """
        cutoff = (now or datetime.now(timezone.utc)) - self._stale_after
        rows = await self._transcripts.fetch_unprocessed(limit or self._batch_size, cutoff)
        processed = 0
        for row in rows:
            transcript_id = str(row["id"])
            text = row.get("transcript_text") or ""
            if not text.strip() or not row.get("assessment_id"):
                logger.warning("unprocessable_transcript", transcript_id=transcript_id)
                try:
                    await self._transcripts.mark_processed(transcript_id)
                except PersistenceError as e:
                    logger.error("mark_processed_failed", transcript_id=transcript_id, error=str(e))
                continue
            await self._run(str(row["assessment_id"]), text, transcript_id)
            processed += 1
        return processed

    async def purge_expired(self, now: Optional[datetime] = None) -> int:
        """Delete transcripts past their retention window."""
        try:
            removed = await self._transcripts.delete_expired(now or datetime.now(timezone.utc))
        except PersistenceError as e:
            logger.error("transcript_purge_failed", error=str(e))
            return 0
        if removed:
            logger.info("expired_transcripts_purged", count=removed)
        return removed
