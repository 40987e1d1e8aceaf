from .generic_openai import GenericOpenAIProvider
from ..types import LLMProviderError

__all__ = ["GenericOpenAIProvider", "LLMProviderError"]
