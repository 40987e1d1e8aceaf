"""Shared fixtures for gpt-agent tests."""

from __future__ import annotations

import pytest

from gpt_agent.orchestrator import ChatOrchestrator
from gpt_agent.types import LLMProviderError, SearchError


class FakeCompletionProvider:
    """Completion provider that returns canned responses (no API calls).

    Each entry in *responses* is either a reply string or an exception to raise.
    """

    def __init__(self, responses: list | None = None):
        self._responses = list(responses or ["Here is my answer."])
        self.calls: list[dict] = []

    async def complete(self, model, messages, max_tokens, temperature):
        self.calls.append({
            "model": model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        })
        item = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(item, Exception):
            raise item
        return item


class FakeSearch:
    def __init__(self, text: str = "search results", fail: bool = False):
        self.text = text
        self.fail = fail
        self.calls: list[tuple[str, int]] = []

    async def search(self, query, attempts):
        self.calls.append((query, attempts))
        if self.fail:
            raise SearchError("search backend unavailable")
        return self.text


def server_error(status_code: int = 500, message: str = "upstream exploded") -> LLMProviderError:
    return LLMProviderError(message, provider="openai", status_code=status_code)


@pytest.fixture
def completion() -> FakeCompletionProvider:
    return FakeCompletionProvider()


@pytest.fixture
def search() -> FakeSearch:
    return FakeSearch()


@pytest.fixture
def orchestrator(completion, search) -> ChatOrchestrator:
    return ChatOrchestrator(completion=completion, search=search, model="test-model")
