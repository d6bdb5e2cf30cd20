"""
FastAPI API Server.

REST API for transcript extraction, field validation, the field catalog
and the embedding index.

Start with:
    uvicorn nursing_scribe.api_server:app --reload --port 8000
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from dotenv import load_dotenv
load_dotenv(".env.local")

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from nursing_scribe.api.embeddings import router as embeddings_router
from nursing_scribe.api.extractions import router as extractions_router
from nursing_scribe.api.fields import router as fields_router
from nursing_scribe.api.middleware import RequestIdMiddleware
from nursing_scribe.api.validation import router as validation_router
from nursing_scribe.logging_config import get_logger, setup_logging
from nursing_scribe.services.context import ScribeContext, build_context

setup_logging()
logger = get_logger(__name__)


def create_app(context: Optional[ScribeContext] = None) -> FastAPI:
    """
    Build the application.

    When ``context`` is given it is used as-is and left open on shutdown;
    otherwise the lifespan builds the production context and closes it.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("api_server_starting")
        owned = context is None
        app.state.context = context if context is not None else build_context()
        yield
        if owned:
            await app.state.context.close()
        logger.info("api_server_stopping")

    app = FastAPI(
        title="Nursing Scribe API",
        description="RAG-enhanced field extraction for nursing assessment transcripts",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Restrict in production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(extractions_router)
    app.include_router(validation_router)
    app.include_router(fields_router)
    app.include_router(embeddings_router)

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        logger.warning("bad_request", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.get("/health", tags=["System"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "nursing-scribe"}

    return app


app = create_app()
