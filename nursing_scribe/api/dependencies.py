"""
Shared FastAPI dependencies.
"""

from __future__ import annotations

from fastapi import Request

from nursing_scribe.services.context import ScribeContext


def get_context(request: Request) -> ScribeContext:
    """The service context built by the application lifespan."""
    return request.app.state.context
