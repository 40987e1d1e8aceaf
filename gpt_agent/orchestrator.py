"""ChatOrchestrator: per-request flow from inbound message to textual result."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from .core.attempts import AttemptTracker
from .core.augmentation import AugmentationPolicy
from .core.composer import RequestComposer
from .core.errors import (
    MISSING_MESSAGE,
    NOT_STRING_MESSAGE,
    classify_error,
    search_retry_note,
)
from .core.topic import topic_key
from .core.window import ConversationWindow
from .search import fallback_search_text
from .types import (
    AgentConfig,
    AugmentationReason,
    ChatOutcome,
    CompletionProvider,
    ErrorKind,
    SearchProvider,
    Turn,
)

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
MAX_TOKENS = 1000
AGENT_FOCUS = "Software Architecture & Full-Stack Development"
RESET_MESSAGE = "Conversation history reset successfully."


class ChatOrchestrator:
    """Single-session agent state plus the chat request flow.

    Owns the conversation window and the attempt tracker. Requests are
    serialized with an asyncio lock so the read-decide-mutate sequence for a
    topic is never interleaved with another request.
    """

    def __init__(
        self,
        completion: CompletionProvider,
        search: SearchProvider,
        model: str = "gpt-4o-mini",
        policy: AugmentationPolicy | None = None,
        composer: RequestComposer | None = None,
        window: ConversationWindow | None = None,
        tracker: AttemptTracker | None = None,
    ) -> None:
        self.completion = completion
        self.search = search
        self.model = model
        self.policy = policy or AugmentationPolicy()
        self.composer = composer or RequestComposer()
        self.window = window if window is not None else ConversationWindow()
        self.tracker = tracker if tracker is not None else AttemptTracker()
        self._lock = asyncio.Lock()

    @classmethod
    def from_config(cls, config: AgentConfig) -> ChatOrchestrator:
        from .providers import GenericOpenAIProvider
        from .search import get_search_provider

        completion = GenericOpenAIProvider(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
        )
        return cls(
            completion=completion,
            search=get_search_provider(config),
            model=config.model,
            policy=AugmentationPolicy(legacy_reasons=config.augmentation.legacy_reasons),
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def chat(self, message: str | None, context: str | None = None) -> ChatOutcome:
        """Run one chat request. Never raises for upstream failures."""
        if not message:
            return ChatOutcome(ok=False, text=MISSING_MESSAGE, error_kind=ErrorKind.INVALID_INPUT)
        if not isinstance(message, str):
            return ChatOutcome(ok=False, text=NOT_STRING_MESSAGE, error_kind=ErrorKind.INVALID_INPUT)

        async with self._lock:
            return await self._chat_locked(message, context)

    async def _chat_locked(self, message: str, context: str | None) -> ChatOutcome:
        topic = topic_key(message)
        attempts = self.tracker.get(topic)
        decision = self.policy.decide(message, attempts)
        logger.debug(
            'message="%s", attempts=%d, augment=%s (%s)',
            message, attempts, decision.triggered, decision.reason,
        )

        search_text = None
        if decision.triggered:
            search_text = await self._fetch_search(message, attempts, decision.reason)

        user_turn = self.composer.user_turn(message, context, search_text)
        messages = self.composer.compose(
            message,
            self.window,
            context=context,
            augmented=decision.triggered,
            search_text=search_text,
        )

        try:
            response = await self.completion.complete(
                self.model,
                messages,
                max_tokens=MAX_TOKENS,
                temperature=TEMPERATURE,
            )
        except Exception as e:
            count = self.tracker.increment(topic)
            kind, text = classify_error(e)
            logger.error("Completion failed (%s, attempt %d): %s", kind.value, count, e)
            if count >= self.policy.failed_attempts_threshold:
                text += search_retry_note(count)
            return ChatOutcome(
                ok=False, text=text, error_kind=kind, attempts=count, decision=decision,
            )

        self.window.append_pair(user_turn, Turn(role="assistant", content=response))
        self.tracker.reset(topic)
        return ChatOutcome(ok=True, text=response, attempts=0, decision=decision)

    async def _fetch_search(self, message: str, attempts: int, reason: AugmentationReason) -> str:
        try:
            text = await self.search.search(message, attempts)
        except Exception as e:
            logger.warning("Search failed, using fallback text: %s", e)
            return fallback_search_text(message, reason)
        logger.debug("Added web search results to user content")
        return text

    async def reset(self) -> str:
        async with self._lock:
            self.window.clear()
            self.tracker.clear()
        return RESET_MESSAGE

    def status(self) -> str:
        return (
            "Agent Status:\n"
            f"- Model: {self.model}\n"
            f"- Conversation turns: {len(self.window)}\n"
            f"- Tracked topics with attempts: {self.tracker.size()}\n"
            f"- Agent focus: {AGENT_FOCUS}"
        )

    async def handle_tool_call(self, name: str, arguments: dict[str, Any] | None = None) -> str:
        """Dispatch a remote tool call by name. Always returns text."""
        arguments = arguments or {}
        try:
            if name == "chat_with_agent":
                outcome = await self.chat(arguments.get("message"), arguments.get("context"))
                return outcome.render()
            if name == "reset_conversation":
                return await self.reset()
            if name == "get_agent_status":
                return self.status()
            return f"Error: Unknown tool: {name}"
        except Exception as e:
            logger.exception("Tool %s failed", name)
            return f"Error: {e}"
