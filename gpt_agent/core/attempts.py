"""AttemptTracker: consecutive failed completions per topic key."""

from __future__ import annotations

from collections.abc import Iterator


class AttemptTracker:
    """Map topic key -> consecutive failure count.

    A key is present only while it has at least one unresolved failure;
    a successful completion removes it.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def get(self, key: str) -> int:
        return self._counts.get(key, 0)

    def increment(self, key: str) -> int:
        count = self._counts.get(key, 0) + 1
        self._counts[key] = count
        return count

    def reset(self, key: str) -> None:
        self._counts.pop(key, None)

    def clear(self) -> None:
        self._counts.clear()

    def size(self) -> int:
        return len(self._counts)

    def keys(self) -> list[str]:
        return list(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, key: object) -> bool:
        return key in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._counts))
