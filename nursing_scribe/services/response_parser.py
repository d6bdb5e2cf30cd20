"""
Model response decoding.

The completion endpoint is asked for a JSON object, but models still
return a bare array, wrap the list under a different key, or fence the
payload in markdown. Each accepted layout is a distinct shape; anything
that is valid JSON without a list decodes to an empty result, and invalid
JSON raises ``ResponseParseError`` so the caller can fall back.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Union

from nursing_scribe.errors import ResponseParseError
from nursing_scribe.logging_config import get_logger

logger = get_logger(__name__)

WRAPPER_KEYS = ("extractions", "fields", "data")

_CODE_FENCE = re.compile(r"^\s*```[a-zA-Z]*\s*|\s*```\s*$")


@dataclass(frozen=True)
class ArrayShape:
    items: list[Any]


@dataclass(frozen=True)
class WrappedShape:
    key: str
    items: list[Any]


@dataclass(frozen=True)
class UnrecognizedShape:
    payload: Any


ResponseShape = Union[ArrayShape, WrappedShape, UnrecognizedShape]


def strip_code_fences(content: str) -> str:
    return _CODE_FENCE.sub("", content).strip()


def classify_response(content: str) -> ResponseShape:
    """Decode ``content`` and tag which layout it uses."""
    text = strip_code_fences(content or "")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Model response is not valid JSON: {e}") from e

    if isinstance(payload, list):
        return ArrayShape(items=payload)
    if isinstance(payload, dict):
        for key in WRAPPER_KEYS:
            if isinstance(payload.get(key), list):
                return WrappedShape(key=key, items=payload[key])
    return UnrecognizedShape(payload=payload)


def parse_model_response(content: str) -> list[dict[str, Any]]:
    """
    Return the raw extraction items from a model response.

    Non-object items are dropped. Raises ``ResponseParseError`` when the
    response is not JSON at all.
    """
    shape = classify_response(content)

    if isinstance(shape, UnrecognizedShape):
        logger.warning(
            "unexpected_response_format",
            payload_type=type(shape.payload).__name__,
        )
        return []

    if isinstance(shape, WrappedShape):
        logger.debug("response_wrapped", key=shape.key, items=len(shape.items))

    return [item for item in shape.items if isinstance(item, dict)]
