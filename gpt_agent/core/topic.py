"""Topic keys: coarse grouping of messages for attempt tracking."""

from __future__ import annotations

TOPIC_KEY_LENGTH = 50


def topic_key(message: str, length: int = TOPIC_KEY_LENGTH) -> str:
    """Return the first *length* characters of *message*.

    Not an identifier: different questions sharing a prefix share a key.
    """
    return message[:length]
