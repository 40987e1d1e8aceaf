"""gpt-agent: MCP server for a software-development GPT agent."""

from .config import load_config
from .orchestrator import ChatOrchestrator
from .types import (
    AgentConfig,
    AugmentationDecision,
    ChatOutcome,
    ErrorKind,
    LLMProviderError,
    Turn,
)

__version__ = "1.0.0"

__all__ = [
    "ChatOrchestrator",
    "load_config",
    "AgentConfig",
    "AugmentationDecision",
    "ChatOutcome",
    "ErrorKind",
    "LLMProviderError",
    "Turn",
]
