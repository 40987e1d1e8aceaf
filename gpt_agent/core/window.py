"""ConversationWindow: bounded recent-turn history sent with each request."""

from __future__ import annotations

from ..types import Turn

MAX_TURNS = 10
KEEP_TURNS = 8


class ConversationWindow:
    """Ordered user/assistant turns, pruned from the front.

    Once the window grows past ``max_turns`` only the last ``keep_turns``
    are kept. Both limits are even so whole user/assistant pairs are dropped.
    The per-call system turn is never stored here.
    """

    def __init__(self, max_turns: int = MAX_TURNS, keep_turns: int = KEEP_TURNS) -> None:
        if keep_turns > max_turns:
            raise ValueError(f"keep_turns ({keep_turns}) must be <= max_turns ({max_turns})")
        self.max_turns = max_turns
        self.keep_turns = keep_turns
        self._turns: list[Turn] = []

    def append(self, turn: Turn) -> None:
        self._turns.append(turn)
        self.enforce_capacity()

    def append_pair(self, user_turn: Turn, assistant_turn: Turn) -> None:
        self._turns.append(user_turn)
        self._turns.append(assistant_turn)
        self.enforce_capacity()

    def enforce_capacity(self) -> None:
        if len(self._turns) > self.max_turns:
            self._turns = self._turns[-self.keep_turns:]

    def snapshot(self) -> list[Turn]:
        return list(self._turns)

    def to_messages(self) -> list[dict]:
        return [t.to_dict() for t in self._turns]

    def clear(self) -> None:
        self._turns.clear()

    def __len__(self) -> int:
        return len(self._turns)
