"""CLI: gpt-agent serve, chat, status, config validate."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from ..config import config_warnings, load_config, validate_config


def _setup_logging(debug: bool) -> None:
    # stdout carries the MCP protocol; diagnostics go to stderr
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load(args):
    config = load_config(config_path=args.config)
    if args.debug:
        config.debug = True
    _setup_logging(config.debug)
    for warning in config_warnings(config):
        print(f"Warning: {warning}", file=sys.stderr)
    return config


def _build_orchestrator(config):
    from ..orchestrator import ChatOrchestrator
    return ChatOrchestrator.from_config(config)


def cmd_serve(args):
    """Start the MCP stdio server."""
    config = _load(args)
    errors = validate_config(config)
    if errors:
        for e in errors:
            print(f"Config error: {e}", file=sys.stderr)
        sys.exit(1)

    from ..mcp.server import serve, set_orchestrator

    set_orchestrator(_build_orchestrator(config))
    serve()


def cmd_chat(args):
    """Send one message through the agent and print the reply."""
    config = _load(args)
    orchestrator = _build_orchestrator(config)

    async def _run() -> str:
        try:
            return await orchestrator.handle_tool_call(
                "chat_with_agent",
                {"message": args.message, "context": args.context},
            )
        finally:
            await orchestrator.completion.aclose()

    print(asyncio.run(_run()))


def cmd_status(args):
    """Show agent status."""
    config = _load(args)
    orchestrator = _build_orchestrator(config)
    print(orchestrator.status())


def cmd_config_validate(args):
    """Validate the configuration."""
    try:
        config = _load(args)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        print("Config validation failed:")
        for e in errors:
            print(f"  - {e}")
        sys.exit(1)

    print("Config is valid.")
    print(f"  Model:    {config.model}")
    print(f"  Base URL: {config.base_url}")
    print(f"  Search:   {config.search.backend}")
    print(f"  API key:  {'set' if config.api_key else 'missing'}")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="gpt-agent",
        description="MCP server for a software-development GPT agent",
    )
    parser.add_argument("--config", "-c", help="Path to config file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # serve
    subparsers.add_parser("serve", help="Start the MCP server on stdio (default)")

    # chat
    chat_parser = subparsers.add_parser("chat", help="Send a single message to the agent")
    chat_parser.add_argument("--message", "-m", required=True, help="Message for the agent")
    chat_parser.add_argument("--context", help="Optional project/environment context")

    # status
    subparsers.add_parser("status", help="Show agent status")

    # config
    config_parser = subparsers.add_parser("config", help="Config operations")
    config_sub = config_parser.add_subparsers(dest="config_command")
    config_sub.add_parser("validate", help="Validate config file")

    args = parser.parse_args(argv)

    if not args.command or args.command == "serve":
        cmd_serve(args)
    elif args.command == "chat":
        cmd_chat(args)
    elif args.command == "status":
        cmd_status(args)
    elif args.command == "config":
        if args.config_command == "validate":
            cmd_config_validate(args)
        else:
            print("Usage: gpt-agent config validate")
            sys.exit(1)


if __name__ == "__main__":
    main()
