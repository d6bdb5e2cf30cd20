"""
API Router: Field Catalog Endpoints.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException

from nursing_scribe.api.dependencies import get_context
from nursing_scribe.schemas.field import FieldDefinition
from nursing_scribe.services.context import ScribeContext

router = APIRouter(prefix="/fields", tags=["Fields"])


@router.get("")
async def list_fields(
    section: Optional[str] = None,
    q: Optional[str] = None,
    context: ScribeContext = Depends(get_context),
) -> dict[str, Any]:
    """List catalog fields, optionally filtered by section or a search term."""
    catalog = context.catalog
    if q:
        fields = catalog.search(q)
        if section:
            fields = [f for f in fields if f.section_id == section]
    elif section:
        fields = catalog.by_section(section)
    else:
        fields = list(catalog.all_entries())

    return {
        "data": [f.model_dump(mode="json") for f in fields],
        "total": len(fields),
    }


@router.get("/{field_id}", response_model=FieldDefinition)
async def get_field(
    field_id: str,
    context: ScribeContext = Depends(get_context),
) -> FieldDefinition:
    definition = context.catalog.lookup(field_id)
    if definition is None:
        raise HTTPException(status_code=404, detail=f"Unknown field ID: {field_id}")
    return definition
