"""Map completion failures to user-facing text."""

from __future__ import annotations

from ..types import ErrorKind, LLMProviderError

AUTH_MESSAGE = "Authentication failed. Please check your OpenAI API key."
RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."
MISSING_MESSAGE = "Error: message is required"
NOT_STRING_MESSAGE = "Error: message must be a string"


def classify_status(status_code: int | None) -> ErrorKind:
    if status_code == 401:
        return ErrorKind.AUTH
    if status_code == 429:
        return ErrorKind.RATE_LIMIT
    if status_code == 400:
        return ErrorKind.BAD_REQUEST
    return ErrorKind.OTHER


def classify_error(error: Exception) -> tuple[ErrorKind, str]:
    """Return the error kind and the text shown to the caller."""
    status_code = error.status_code if isinstance(error, LLMProviderError) else None
    kind = classify_status(status_code)
    detail = str(error)

    if kind is ErrorKind.AUTH:
        return kind, AUTH_MESSAGE
    if kind is ErrorKind.RATE_LIMIT:
        return kind, RATE_LIMIT_MESSAGE
    if kind is ErrorKind.BAD_REQUEST:
        return kind, f"Bad request: {detail}"
    return kind, f"OpenAI API Error: {detail}"


def search_retry_note(attempts: int) -> str:
    return f"\n\nNote: This is attempt #{attempts}. Web search will be used on next attempt."
