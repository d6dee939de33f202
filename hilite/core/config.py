"""Project-wide highlight defaults (.hilite/config.json)."""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from hilite.core.fallbacks import log_best_effort_failure
from hilite.utils import PROJECT_ROOT, safe_write_text

CONFIG_FILE = PROJECT_ROOT / ".hilite" / "config.json"
logger = logging.getLogger(__name__)

OPTION_SECTIONS = ("lexer_options", "formatter_options")


@dataclass(frozen=True)
class ConfigKey:
    type: type
    default: object
    description: str


CONFIG_SCHEMA: dict[str, ConfigKey] = {
    "default_lexer": ConfigKey(
        str, "", "Lexer name or alias used when none is given (empty = guess)"
    ),
    "default_formatter": ConfigKey(
        str, "html", "Formatter name or alias used when none is given"
    ),
    "lexer_options": ConfigKey(dict, {}, "Options passed to every lexer {key: value}"),
    "formatter_options": ConfigKey(
        dict, {}, "Options passed to every formatter {key: value}"
    ),
}


def default_config() -> dict[str, Any]:
    """Return a config dict with all keys set to their defaults."""
    return {k: copy.deepcopy(v.default) for k, v in CONFIG_SCHEMA.items()}


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config from disk, filling missing or mistyped keys with defaults."""
    p = path or CONFIG_FILE
    config: dict[str, Any] = {}
    if p.exists():
        try:
            loaded = json.loads(p.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
            log_best_effort_failure(logger, f"read config {p}", exc)
            loaded = {}
        if isinstance(loaded, dict):
            config = loaded

    for key, schema in CONFIG_SCHEMA.items():
        if not isinstance(config.get(key), schema.type):
            config[key] = copy.deepcopy(schema.default)
    return config


def save_config(config: dict, path: Path | None = None) -> None:
    """Save config to disk atomically."""
    p = path or CONFIG_FILE
    safe_write_text(p, json.dumps(config, indent=2, sort_keys=True) + "\n")


def set_config_value(config: dict, key: str, raw: str) -> None:
    """Parse and set a scalar config value from a raw string."""
    if key not in CONFIG_SCHEMA:
        raise KeyError(f"Unknown config key: {key}")

    schema = CONFIG_SCHEMA[key]
    if schema.type is dict:
        raise ValueError(f"Cannot set dict key '{key}' directly, use set-option")
    config[key] = raw.strip()


def unset_config_value(config: dict, key: str) -> None:
    """Reset a config key to its default value."""
    if key not in CONFIG_SCHEMA:
        raise KeyError(f"Unknown config key: {key}")
    config[key] = copy.deepcopy(CONFIG_SCHEMA[key].default)


def _option_section(config: dict, section: str) -> dict:
    if section not in OPTION_SECTIONS:
        raise KeyError(
            f"Unknown option section: {section} (expected one of {', '.join(OPTION_SECTIONS)})"
        )
    options = config.get(section)
    if not isinstance(options, dict):
        options = {}
        config[section] = options
    return options


def set_option_value(config: dict, section: str, key: str, raw: str) -> None:
    """Store a lexer/formatter option; the value stays a string for Pygments to parse."""
    if not key.strip():
        raise ValueError("Option name must not be empty")
    _option_section(config, section)[key.strip()] = raw.strip()


def unset_option_value(config: dict, section: str, key: str) -> None:
    options = _option_section(config, section)
    if key not in options:
        raise KeyError(f"Option not set in {section}: {key}")
    del options[key]


__all__ = [
    "CONFIG_FILE",
    "CONFIG_SCHEMA",
    "ConfigKey",
    "OPTION_SECTIONS",
    "default_config",
    "load_config",
    "save_config",
    "set_config_value",
    "set_option_value",
    "unset_config_value",
    "unset_option_value",
]
