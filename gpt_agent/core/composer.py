"""RequestComposer: assemble the message list for a completion call."""

from __future__ import annotations

from ..types import Turn
from .window import ConversationWindow

SYSTEM_PROMPT = """You are a Senior Software Architect and Full-Stack Developer with expertise in:
- Software architecture and design patterns
- Full-stack development (frontend, backend, databases)
- Code debugging and optimization
- Technology stack recommendations
- Best practices and code review

Focus ONLY on software development, architecture, and debugging topics. Provide practical, actionable solutions. Be concise but thorough."""

SEARCH_NOTICE = (
    "You have access to current web information for this query. Use it to provide "
    "up-to-date information about versions, APIs, or solutions."
)


class RequestComposer:
    """Build ``[system, *window, user]`` in OpenAI chat wire format."""

    def __init__(self, system_prompt: str = SYSTEM_PROMPT, search_notice: str = SEARCH_NOTICE) -> None:
        self.system_prompt = system_prompt
        self.search_notice = search_notice

    def system_turn(self, augmented: bool = False) -> Turn:
        content = self.system_prompt
        if augmented:
            content += f"\n\n{self.search_notice}"
        return Turn(role="system", content=content)

    def user_turn(
        self,
        message: str,
        context: str | None = None,
        search_text: str | None = None,
    ) -> Turn:
        content = f"Context: {context}\n\nQuestion: {message}" if context else message
        if search_text is not None:
            content += f"\n\nWeb Search Results: {search_text}"
        return Turn(role="user", content=content)

    def compose(
        self,
        message: str,
        window: ConversationWindow,
        *,
        context: str | None = None,
        augmented: bool = False,
        search_text: str | None = None,
    ) -> list[dict]:
        """Return the ordered messages for one completion request.

        ``search_text`` is only included when ``augmented`` is true.
        """
        user = self.user_turn(message, context, search_text if augmented else None)
        messages = [self.system_turn(augmented).to_dict()]
        messages.extend(window.to_messages())
        messages.append(user.to_dict())
        return messages
