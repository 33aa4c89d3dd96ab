"""Backend for OpenAI-compatible ``/chat/completions`` endpoints, over httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from infinity_market.backend.base import BackendError, TextBackend

logger = logging.getLogger("infinity_market.backend")


class OpenAICompatibleBackend(TextBackend):
    """Talks to any server implementing the OpenAI chat completions API.

    Pass *client* to share a connection pool or to inject a mock transport;
    otherwise the backend owns its own :class:`httpx.AsyncClient`.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout_seconds: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._endpoint = base_url.rstrip("/") + "/chat/completions"
        self._headers = {"Authorization": f"Bearer {api_key}"}
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    @property
    def name(self) -> str:
        return "openai-compatible"

    async def complete(self, prompt: str, *, model: str, json_mode: bool = True) -> str:
        body: dict[str, Any] = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
        }
        if json_mode:
            body["response_format"] = {"type": "json_object"}

        logger.debug("POST %s (model=%s, prompt length=%d)", self._endpoint, model, len(prompt))
        try:
            response = await self._client.post(self._endpoint, json=body, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise BackendError(
                f"Backend returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise BackendError(f"Backend request failed: {exc}") from exc

        try:
            payload = response.json()
            text = payload["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise BackendError("Backend response has no message content") from exc
        if not isinstance(text, str) or not text:
            raise BackendError("Backend response has no message content")
        return text

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
