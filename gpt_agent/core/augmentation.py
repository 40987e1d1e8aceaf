"""AugmentationPolicy: keyword + failure-count rules for search augmentation."""

from __future__ import annotations

from ..types import AugmentationDecision, AugmentationReason

VERSION_KEYWORDS = ("version", "latest", "current", "update", "upgrade", "new release")
API_KEYWORDS = ("api", "documentation", "docs", "reference", "endpoint")
FAILED_ATTEMPTS_THRESHOLD = 3

# Narrower sets used to name the reason in legacy mode
LEGACY_VERSION_REASON_KEYWORDS = ("version", "latest")
LEGACY_API_REASON_KEYWORDS = ("api", "docs")


def _has_any(text_lower: str, keywords: tuple[str, ...]) -> bool:
    return any(kw in text_lower for kw in keywords)


class AugmentationPolicy:
    """Decide whether a request should carry supplementary search text.

    Triggers on any version keyword, any API keyword, or once a topic has
    failed ``failed_attempts_threshold`` times. Matching is case-insensitive
    substring search, so "API" and "apis" both count.

    With ``legacy_reasons`` the reason is derived from the narrow keyword
    sets, which can yield ``general`` for a message that triggered on a
    broader keyword such as "upgrade".
    """

    def __init__(
        self,
        version_keywords: tuple[str, ...] = VERSION_KEYWORDS,
        api_keywords: tuple[str, ...] = API_KEYWORDS,
        failed_attempts_threshold: int = FAILED_ATTEMPTS_THRESHOLD,
        legacy_reasons: bool = False,
    ) -> None:
        self.version_keywords = tuple(k.lower() for k in version_keywords)
        self.api_keywords = tuple(k.lower() for k in api_keywords)
        self.failed_attempts_threshold = failed_attempts_threshold
        self.legacy_reasons = legacy_reasons

    def decide(self, message: str, attempts: int) -> AugmentationDecision:
        text_lower = message.lower()
        version_hit = _has_any(text_lower, self.version_keywords)
        api_hit = _has_any(text_lower, self.api_keywords)
        failed = attempts >= self.failed_attempts_threshold

        if not (version_hit or api_hit or failed):
            return AugmentationDecision(triggered=False)

        return AugmentationDecision(triggered=True, reason=self.reason(message, attempts))

    def reason(self, message: str, attempts: int) -> AugmentationReason:
        """Name why a message would be augmented (precedence: version, api, failures)."""
        text_lower = message.lower()
        if self.legacy_reasons:
            version_keywords = LEGACY_VERSION_REASON_KEYWORDS
            api_keywords = LEGACY_API_REASON_KEYWORDS
        else:
            version_keywords = self.version_keywords
            api_keywords = self.api_keywords

        if _has_any(text_lower, version_keywords):
            return "version_check"
        if _has_any(text_lower, api_keywords):
            return "api_docs"
        if attempts >= self.failed_attempts_threshold:
            return "failed_attempts"
        return "general"


_default_policy = AugmentationPolicy()


def decide(message: str, attempts: int, *, legacy_reasons: bool = False) -> AugmentationDecision:
    """Pure decision with the default keyword sets."""
    if legacy_reasons:
        return AugmentationPolicy(legacy_reasons=True).decide(message, attempts)
    return _default_policy.decide(message, attempts)
