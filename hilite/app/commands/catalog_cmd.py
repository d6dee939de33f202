"""lexers / formatters commands: list what Pygments has registered."""

from __future__ import annotations

import argparse
import dataclasses
import json

from hilite.engine.formatters import available_formatters
from hilite.engine.lexers import available_lexers
from hilite.utils import colorize, print_table

_MAX_CELL = 48


def _cell(values: tuple[str, ...]) -> str:
    text = ", ".join(values)
    if len(text) > _MAX_CELL:
        return text[: _MAX_CELL - 1] + "…"
    return text


def cmd_lexers(args: argparse.Namespace) -> None:
    """List registered lexers with aliases and filename patterns."""
    lexers = available_lexers()
    if getattr(args, "json", False):
        print(json.dumps([dataclasses.asdict(info) for info in lexers], indent=2))
        return

    print()
    print_table(
        ["Lexer", "Aliases", "Filenames"],
        [[info.name, _cell(info.aliases), _cell(info.filenames)] for info in lexers],
    )
    print(colorize(f"\n  {len(lexers)} lexers\n", "dim"))


def cmd_formatters(args: argparse.Namespace) -> None:
    """List registered formatters with aliases and filename patterns."""
    formatters = available_formatters()
    if getattr(args, "json", False):
        print(json.dumps([dataclasses.asdict(info) for info in formatters], indent=2))
        return

    print()
    print_table(
        ["Formatter", "Aliases", "Filenames"],
        [[info.name, _cell(info.aliases), _cell(info.filenames)] for info in formatters],
    )
    print(colorize(f"\n  {len(formatters)} formatters\n", "dim"))


__all__ = ["cmd_formatters", "cmd_lexers"]
