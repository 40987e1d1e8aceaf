"""Search backends that supply supplementary text for augmented requests."""

from ..types import AgentConfig, SearchError, SearchProvider
from .simulated import SimulatedSearch, fallback_search_text


def get_search_provider(config: AgentConfig) -> SearchProvider:
    backend = config.search.backend
    if backend == "simulated":
        from ..core.augmentation import AugmentationPolicy
        return SimulatedSearch(
            AugmentationPolicy(legacy_reasons=config.augmentation.legacy_reasons)
        )
    raise ValueError(f"Unknown search backend: {backend}")


__all__ = [
    "SearchError",
    "SearchProvider",
    "SimulatedSearch",
    "fallback_search_text",
    "get_search_provider",
]
