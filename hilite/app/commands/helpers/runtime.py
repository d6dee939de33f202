"""Runtime context helpers for command handlers."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from hilite.core.config import CONFIG_FILE, load_config
from hilite.core.fallbacks import print_error
from hilite.engine.options import Options, parse_option, parse_options


@dataclass(frozen=True)
class CommandRuntime:
    """Explicit runtime dependencies shared by command handlers."""

    config: dict[str, Any]
    config_path: Path


def command_runtime(args) -> CommandRuntime:
    """Return runtime context from explicit args.runtime or construct one."""
    runtime = getattr(args, "runtime", None)
    if isinstance(runtime, CommandRuntime):
        return runtime

    raw_path = getattr(args, "config", None)
    config_path = Path(raw_path) if raw_path else CONFIG_FILE
    return CommandRuntime(config=load_config(config_path), config_path=config_path)


def cli_options(args) -> Options:
    """Collect -O (comma-separated) and -P (single) flags into one options map.

    Malformed flags print an error and exit 1.
    """
    try:
        options = parse_options(getattr(args, "options", None))
        for raw in getattr(args, "option", None) or ():
            key, value = parse_option(raw)
            options[key] = value
    except ValueError as e:
        print_error(str(e))
        sys.exit(1)
    return options


__all__ = ["CommandRuntime", "cli_options", "command_runtime"]
