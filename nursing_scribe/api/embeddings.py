"""
API Router: Embedding Index Endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from nursing_scribe.api.dependencies import get_context
from nursing_scribe.logging_config import get_logger
from nursing_scribe.services.context import ScribeContext
from nursing_scribe.services.embedding_index import RebuildReport

logger = get_logger(__name__)
router = APIRouter(prefix="/embeddings", tags=["Embeddings"])


@router.post("/rebuild", response_model=RebuildReport)
async def rebuild_embeddings(
    context: ScribeContext = Depends(get_context),
) -> RebuildReport:
    """Regenerate the field embedding index from the catalog."""
    report = await context.index_builder.rebuild_index()
    logger.info(
        "embedding_rebuild_requested",
        success_count=report.success_count,
        error_count=report.error_count,
    )
    return report
