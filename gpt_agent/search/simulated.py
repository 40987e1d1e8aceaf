"""Simulated search backend and the fallback text used when search fails."""

from __future__ import annotations

from ..core.augmentation import AugmentationPolicy
from ..types import AugmentationReason


class SimulatedSearch:
    """Deterministic stand-in for a web search backend.

    Returns canned pointers tagged with the augmentation reason; it never
    touches the network.
    """

    def __init__(self, policy: AugmentationPolicy | None = None) -> None:
        self.policy = policy or AugmentationPolicy()

    async def search(self, query: str, attempts: int) -> str:
        reason = self.policy.reason(query, attempts)
        return (
            f'Current information found for "{query}" ({reason}): \n'
            "- Latest stable versions and best practices available\n"
            "- Current API documentation and examples\n"
            "- Recent community solutions and recommendations\n"
            "- Updated compatibility information"
        )


def fallback_search_text(query: str, reason: AugmentationReason) -> str:
    """Placeholder used when the search backend raises."""
    return (
        f'No live search results could be retrieved for "{query}" ({reason}). '
        "Answer from existing knowledge and state any version or API details "
        "that should be verified against current documentation."
    )
