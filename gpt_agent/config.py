"""Configuration loading, validation, and defaults."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from .types import AgentConfig, AugmentationConfig, SearchConfig

CONFIG_FILENAMES = [
    "gpt-agent.yaml",
    "gpt-agent.yml",
    "gpt-agent.json",
]

SEARCH_BACKENDS = ("simulated",)


def _discover_config() -> Path | None:
    """Search CWD then parent dirs up to home for a config file."""
    cwd = Path.cwd()
    home = Path.home()
    search = cwd
    while True:
        for name in CONFIG_FILENAMES:
            candidate = search / name
            if candidate.is_file():
                return candidate
        if search == home or search == search.parent:
            break
        search = search.parent
    return None


def _env_flag(value: str | None) -> bool | None:
    if value is None:
        return None
    return value.strip().lower() == "true"


def _as_bool(value: Any) -> bool:
    """Config-file booleans; quoted strings such as "false" are parsed, not truth-tested."""
    if isinstance(value, str):
        return bool(_env_flag(value))
    return bool(value)


def _build_config(raw: dict[str, Any], env: dict[str, str] | None = None) -> AgentConfig:
    """Build an AgentConfig from a raw dict, then apply environment overrides."""
    env = env if env is not None else {}

    search_raw = raw.get("search", {}) or {}
    augmentation_raw = raw.get("augmentation", {}) or {}

    config = AgentConfig(
        model=raw.get("model", "gpt-4o-mini"),
        api_key=raw.get("api_key", ""),
        base_url=raw.get("base_url", "https://api.openai.com/v1"),
        timeout=float(raw.get("timeout", 60.0)),
        debug=_as_bool(raw.get("debug", False)),
        search=SearchConfig(backend=search_raw.get("backend", "simulated")),
        augmentation=AugmentationConfig(
            legacy_reasons=_as_bool(augmentation_raw.get("legacy_reasons", False)),
        ),
    )

    # Environment wins over file values
    if env.get("OPENAI_API_KEY"):
        config.api_key = env["OPENAI_API_KEY"]
    if env.get("OPENAI_MODEL"):
        config.model = env["OPENAI_MODEL"]
    if env.get("OPENAI_BASE_URL"):
        config.base_url = env["OPENAI_BASE_URL"]
    debug = _env_flag(env.get("DEBUG"))
    if debug is not None:
        config.debug = debug

    return config


def validate_config(config: AgentConfig) -> list[str]:
    """Validate a config. Returns list of error strings (empty = valid)."""
    errors: list[str] = []

    if not config.model:
        errors.append("model must not be empty")

    if config.timeout <= 0:
        errors.append(f"timeout ({config.timeout}) must be > 0")

    if not config.base_url.startswith(("http://", "https://")):
        errors.append(f"base_url must be an http(s) URL, got '{config.base_url}'")

    if config.search.backend not in SEARCH_BACKENDS:
        errors.append(
            f"Unknown search backend '{config.search.backend}' "
            f"(expected one of: {', '.join(SEARCH_BACKENDS)})"
        )

    return errors


def config_warnings(config: AgentConfig) -> list[str]:
    """Non-fatal problems worth reporting at startup."""
    warnings: list[str] = []
    if not config.api_key:
        warnings.append("OPENAI_API_KEY environment variable not set")
    return warnings


def load_config(
    config_path: str | Path | None = None,
    config_dict: dict | None = None,
    env: dict[str, str] | None = None,
) -> AgentConfig:
    """Load config from dict, explicit path, or auto-discover.

    Environment variables (``OPENAI_API_KEY``, ``OPENAI_MODEL``,
    ``OPENAI_BASE_URL``, ``DEBUG``) override file values. When *env* is not
    given, a ``.env`` file is loaded first and ``os.environ`` is used.
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = dict(os.environ)

    if config_dict is not None:
        return _build_config(config_dict, env)

    if config_path is None:
        config_path = env.get("GPT_AGENT_CONFIG") or None

    if config_path is not None:
        path = Path(config_path)
    else:
        path = _discover_config()

    if path is None:
        # Return defaults
        return _build_config({}, env)

    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    text = path.read_text()
    if path.suffix == ".json":
        raw = json.loads(text)
    else:
        raw = yaml.safe_load(text) or {}

    return _build_config(raw, env)
