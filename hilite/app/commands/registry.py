"""Central command registry for CLI command handler resolution."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hilite.app.commands.catalog_cmd import cmd_formatters, cmd_lexers
from hilite.app.commands.config_cmd import cmd_config
from hilite.app.commands.highlight_cmd import cmd_guess, cmd_highlight, cmd_styledefs

CommandHandler = Callable[[Any], None]

COMMAND_HANDLERS: dict[str, CommandHandler] = {
    "highlight": cmd_highlight,
    "guess": cmd_guess,
    "lexers": cmd_lexers,
    "formatters": cmd_formatters,
    "styledefs": cmd_styledefs,
    "config": cmd_config,
}

__all__ = ["COMMAND_HANDLERS", "CommandHandler"]
