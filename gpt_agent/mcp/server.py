"""MCP server exposing the software-development agent as tools."""

from __future__ import annotations

import logging
import os

from mcp.server.fastmcp import FastMCP

logger = logging.getLogger(__name__)

mcp = FastMCP(
    "gpt",
    instructions="GPT agent focused on software development, architecture, and debugging",
)

# Lazy orchestrator singleton
_orchestrator = None


def _get_orchestrator():
    """Get or create the orchestrator singleton."""
    global _orchestrator
    if _orchestrator is None:
        from ..config import config_warnings, load_config, validate_config
        from ..orchestrator import ChatOrchestrator
        config = load_config(config_path=os.environ.get("GPT_AGENT_CONFIG"))
        for warning in config_warnings(config):
            logger.warning("Warning: %s", warning)
        errors = validate_config(config)
        if errors:
            for e in errors:
                logger.error("Config error: %s", e)
            raise ValueError(f"Invalid configuration: {'; '.join(errors)}")
        _orchestrator = ChatOrchestrator.from_config(config)
    return _orchestrator


def set_orchestrator(orchestrator) -> None:
    """Install a pre-built orchestrator (used by the CLI)."""
    global _orchestrator
    _orchestrator = orchestrator


async def _call(name: str, arguments: dict | None = None) -> str:
    """Run a tool through the orchestrator, reporting setup failures as text."""
    try:
        orchestrator = _get_orchestrator()
    except (ValueError, FileNotFoundError) as e:
        return f"Error: {e}"
    return await orchestrator.handle_tool_call(name, arguments)


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------

@mcp.tool()
async def chat_with_agent(message: str, context: str | None = None) -> str:
    """Chat with the GPT agent focused on software development and architecture.

    Args:
        message: Your message to the software development agent.
        context: Optional context about your development environment or project.

    Returns:
        The agent's reply, or a textual error description.
    """
    return await _call("chat_with_agent", {"message": message, "context": context})


@mcp.tool()
async def reset_conversation() -> str:
    """Reset the conversation history with the agent."""
    return await _call("reset_conversation")


@mcp.tool()
async def get_agent_status() -> str:
    """Get current agent status and conversation info."""
    return await _call("get_agent_status")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def serve():
    """Start the MCP server (stdio transport)."""
    logger.debug("Starting GPT Agent MCP server on stdio")
    try:
        mcp.run()
    except KeyboardInterrupt:
        logger.debug("Interrupted, shutting down")


if __name__ == "__main__":
    serve()
