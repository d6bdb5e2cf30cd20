"""
Exception hierarchy for the extraction pipeline.

Only precondition failures (``ValueError``) are meant to reach callers of
the transcript processor; everything below is raised internally and
converted into a fallback, a per-field validation error or a log entry.
"""

from __future__ import annotations


class ScribeError(Exception):
    """Base class for all pipeline errors."""


class CatalogError(ScribeError):
    """The field catalog data is inconsistent (duplicate ids, bad rules)."""


class UnknownFieldError(ScribeError, KeyError):
    """A referenced field id does not exist in the catalog."""

    def __init__(self, field_ids: list[str] | tuple[str, ...]) -> None:
        self.field_ids = tuple(field_ids)
        super().__init__(f"Unknown field ID(s): {', '.join(self.field_ids)}")

    def __str__(self) -> str:
        return self.args[0]


class RetrievalError(ScribeError):
    """Embedding or vector search failed, including timeouts."""


class CompletionError(ScribeError):
    """The language-model call failed or timed out."""


class ResponseParseError(ScribeError):
    """The model output could not be decoded as JSON."""


class ExtractionStrategyError(ScribeError):
    """An extraction strategy could not produce a result; try the next one."""


class PersistenceError(ScribeError):
    """A store write failed."""
