"""GenericOpenAIProvider: OpenAI-compatible chat completions via httpx.

Works with api.openai.com or any server exposing /v1/chat/completions.
"""

from __future__ import annotations

import logging

import httpx

from ..types import LLMProviderError

logger = logging.getLogger(__name__)


def _error_detail(response: httpx.Response) -> str:
    """Pull the human-readable message out of an OpenAI error body."""
    try:
        data = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        if isinstance(error, str):
            return error
    return response.text or f"HTTP {response.status_code}"


class GenericOpenAIProvider:
    """Completion provider for any OpenAI-compatible chat completions API.

    The HTTP client is created lazily on the first request so a process can
    start without credentials and report the problem per call instead.
    """

    def __init__(
        self,
        api_key: str = "",
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client
        self.last_usage: dict = {}  # populated after each complete() call

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def complete(
        self,
        model: str,
        messages: list[dict],
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Send a chat completion request and return the first choice's text."""
        url = f"{self.base_url}/chat/completions"
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        payload = {
            "model": model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }

        try:
            response = await self._get_client().post(url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            raise LLMProviderError(f"HTTP error: {e}", provider="openai") from e

        if response.status_code != 200:
            raise LLMProviderError(
                _error_detail(response),
                provider="openai",
                status_code=response.status_code,
            )

        data = response.json()
        self.last_usage = data.get("usage", {})
        logger.debug("Completion usage: %s", self.last_usage)
        choices = data.get("choices", [])
        if choices:
            return choices[0].get("message", {}).get("content") or ""
        return ""

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
