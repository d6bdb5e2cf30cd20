"""
Embedding Index Builder.

Renders every catalog field into a medical-context document, embeds it
and stores ``(field_id, vector, document)``. The index is rebuilt from
scratch whenever the catalog changes; there is no incremental update.
"""

from __future__ import annotations

import asyncio

from pydantic import BaseModel, ConfigDict, Field

from nursing_scribe.errors import PersistenceError, RetrievalError
from nursing_scribe.logging_config import get_logger
from nursing_scribe.schemas.field import FieldDefinition
from nursing_scribe.services.field_catalog import FieldCatalog
from nursing_scribe.services.interfaces import EmbeddingService, EmbeddingStore

logger = get_logger(__name__)


class RebuildReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success_count: int = Field(alias="successCount")
    error_count: int = Field(alias="errorCount")


def render_medical_context(definition: FieldDefinition) -> str:
    """The document embedded for a field; also shown to the model as context."""
    synonyms = ", ".join(definition.synonyms)
    lines = [
        f"Medical Field: {definition.label}",
        f"Section: {definition.section_title}",
        f"Field Type: {definition.field_type.value}",
        f"Synonyms: {synonyms}",
    ]
    if definition.options:
        lines.append(f"Options: {', '.join(definition.options)}")
    if definition.expected_format:
        lines.append(f"Format: {definition.expected_format}")
    lines.extend([
        f"Extraction Hints: {'. '.join(definition.extraction_hints)}",
        f"Medical Context: This field is used in clinical assessment for {definition.section_title.lower()}.",
        f"Common medical terminology includes: {synonyms}.",
        f"Clinical importance: This field helps assess patient {definition.section_id} status and clinical condition.",
    ])
    return "\n".join(lines)


class EmbeddingIndexBuilder:
    """Regenerates the field embedding index from the catalog."""

    def __init__(
        self,
        catalog: FieldCatalog,
        embedder: EmbeddingService,
        store: EmbeddingStore,
    ) -> None:
        self._catalog = catalog
        self._embedder = embedder
        self._store = store
        self._lock = asyncio.Lock()

    async def rebuild_index(self) -> RebuildReport:
        """
        Delete every stored embedding and re-embed the whole catalog.

        A failure on one field is logged and counted; the rebuild carries on
        with the remaining fields.
        """
        async with self._lock:
            logger.info("embedding_rebuild_started", fields=len(self._catalog))

            try:
                await self._store.clear()
            except PersistenceError as e:
                logger.error("embedding_clear_failed", error=str(e))

            success_count = 0
            error_count = 0
            for definition in self._catalog.all_entries():
                document = render_medical_context(definition)
                try:
                    vector = await self._embedder.embed(document)
                    await self._store.insert(definition, vector, document)
                except (RetrievalError, PersistenceError) as e:
                    logger.error("field_embedding_failed", field_id=definition.field_id, error=str(e))
                    error_count += 1
                    continue
                success_count += 1
                logger.debug("field_embedding_generated", field_id=definition.field_id)

            await self._store.publish()

            logger.info(
                "embedding_rebuild_complete",
                success_count=success_count,
                error_count=error_count,
            )
            return RebuildReport(success_count=success_count, error_count=error_count)
