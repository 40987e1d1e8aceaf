"""All dataclasses, Protocols, and type aliases for gpt-agent."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Protocol, runtime_checkable


Role = Literal["system", "user", "assistant"]
AugmentationReason = Literal["version_check", "api_docs", "failed_attempts", "general"]


# ---------------------------------------------------------------------------
# Conversation
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Turn:
    role: Role
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


# ---------------------------------------------------------------------------
# Augmentation
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AugmentationDecision:
    """Whether to fetch supplementary search text, and why."""
    triggered: bool
    reason: AugmentationReason = "general"


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    BAD_REQUEST = "bad_request"
    OTHER = "other"


@dataclass
class ChatOutcome:
    """Result of one chat request. Errors are carried as data, not raised."""
    ok: bool
    text: str
    error_kind: ErrorKind | None = None
    attempts: int = 0  # attempt count for the topic after this request
    decision: AugmentationDecision | None = None

    def render(self) -> str:
        return self.text


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

class LLMProviderError(Exception):
    def __init__(self, message: str, provider: str, status_code: int | None = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class SearchError(Exception):
    pass


@runtime_checkable
class CompletionProvider(Protocol):
    async def complete(
        self,
        model: str,
        messages: list[dict],
        max_tokens: int,
        temperature: float,
    ) -> str: ...


@runtime_checkable
class SearchProvider(Protocol):
    async def search(self, query: str, attempts: int) -> str: ...


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass
class SearchConfig:
    backend: str = "simulated"


@dataclass
class AugmentationConfig:
    legacy_reasons: bool = False  # name reasons from the narrow {version, latest} / {api, docs} sets


@dataclass
class AgentConfig:
    model: str = "gpt-4o-mini"
    api_key: str = ""
    base_url: str = "https://api.openai.com/v1"
    timeout: float = 60.0
    debug: bool = False
    search: SearchConfig = field(default_factory=SearchConfig)
    augmentation: AugmentationConfig = field(default_factory=AugmentationConfig)
