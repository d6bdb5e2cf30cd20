"""
OpenAI API clients.

Embeddings and chat completions over plain ``httpx``. One client instance
is shared by the index builder and the retriever so both sides of the
similarity search live in the same embedding space.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from nursing_scribe.config import Settings
from nursing_scribe.errors import CompletionError, RetrievalError
from nursing_scribe.logging_config import get_logger

logger = get_logger(__name__)


class OpenAIClient:
    """Thin async wrapper around the embeddings and chat completions endpoints."""

    def __init__(self, settings: Settings, http: Optional[httpx.AsyncClient] = None) -> None:
        self._settings = settings
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(
            base_url=settings.openai_base_url,
            timeout=settings.http_timeout_seconds,
        )

    @property
    def embedding_model(self) -> str:
        return self._settings.embedding_model

    async def close(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.openai_api_key}",
            "Content-Type": "application/json",
        }

    async def embed(self, text: str) -> list[float]:
        """Embed ``text``; any HTTP error or timeout is a RetrievalError."""
        try:
            response = await self._http.post(
                "/embeddings",
                headers=self._headers(),
                json={"model": self._settings.embedding_model, "input": text},
            )
            response.raise_for_status()
            data = response.json()
            return [float(x) for x in data["data"][0]["embedding"]]
        except httpx.TimeoutException as e:
            logger.warning("embedding_timeout", model=self._settings.embedding_model)
            raise RetrievalError("Embedding request timed out") from e
        except httpx.HTTPError as e:
            logger.error("embedding_http_error", error=str(e))
            raise RetrievalError(f"Embedding API error: {e}") from e
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error("embedding_malformed_response", error=str(e))
            raise RetrievalError(f"Malformed embedding response: {e}") from e

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Run a strict-JSON chat completion and return the message content."""
        body: dict[str, Any] = {
            "model": self._settings.completion_model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "max_completion_tokens": self._settings.completion_max_tokens,
            "response_format": {"type": "json_object"},
        }
        try:
            response = await self._http.post(
                "/chat/completions",
                headers=self._headers(),
                json=body,
            )
            response.raise_for_status()
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except httpx.TimeoutException as e:
            logger.warning("completion_timeout", model=self._settings.completion_model)
            raise CompletionError("Completion request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.error(
                "completion_http_error",
                status=e.response.status_code,
                body=e.response.text[:500],
            )
            raise CompletionError(f"OpenAI API error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error("completion_transport_error", error=str(e))
            raise CompletionError(f"OpenAI transport error: {e}") from e
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error("completion_malformed_response", error=str(e))
            raise CompletionError(f"Malformed completion response: {e}") from e

        if not isinstance(content, str):
            raise CompletionError("Completion returned no text content")
        return content
