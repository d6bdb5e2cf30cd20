"""
Log pipeline for the scribe service.

One structlog chain serves both our loggers and stdlib ones (uvicorn,
supabase). Output is a JSON line per event under ENVIRONMENT=production
and a coloured console line elsewhere. An API request binds ``trace_id``;
a transcript run binds ``transcript_id``. Transcript text itself only
appears as a short debug preview.

Usage:
    from nursing_scribe.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("extraction_started", assessment_id="abc-123")
"""

from __future__ import annotations

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any

import structlog

from nursing_scribe.config import get_settings

# Bound by RequestIdMiddleware and TranscriptProcessor._run
trace_id_var: ContextVar[str] = ContextVar("trace_id", default="")
transcript_id_var: ContextVar[str] = ContextVar("transcript_id", default="")


def _inject_context_vars(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Copy the bound request and transcript ids onto the event."""
    trace_id = trace_id_var.get("")
    if trace_id:
        event_dict["trace_id"] = trace_id

    transcript_id = transcript_id_var.get("")
    if transcript_id:
        event_dict["transcript_id"] = transcript_id

    return event_dict


def generate_trace_id() -> str:
    """12 hex chars, used when a caller sends no X-Request-ID."""
    return uuid.uuid4().hex[:12]


def preview_text(text: str, limit: int = 100) -> str:
    """Shorten transcript text for debug logs; full transcripts are never logged."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def setup_logging() -> None:
    """Install the structlog pipeline and send stdlib records through it."""
    settings = get_settings()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        _inject_context_vars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_production:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Route third-party stdlib logging through the same pipeline
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.log_level.upper())

    for noisy in ("httpx", "httpcore", "hpack", "urllib3", "asyncio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Module-level loggers are created with ``get_logger(__name__)``."""
    return structlog.get_logger(name)
