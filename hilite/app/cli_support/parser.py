"""CLI parser construction helpers."""

from __future__ import annotations

import argparse

from hilite.app.cli_support.parser_groups import (
    _add_config_parser,
    _add_formatters_parser,
    _add_guess_parser,
    _add_highlight_parser,
    _add_lexers_parser,
    _add_styledefs_parser,
)

USAGE_EXAMPLES = """
commands:
  highlight FILE                Render FILE (or - for stdin) with a lexer + formatter
  guess FILE                    Print the lexer that would be picked for FILE
  lexers                        List registered lexers
  formatters                    List registered formatters
  styledefs                     Print stylesheet definitions for a formatter
  config                        Show/set project defaults

examples:
  hilite highlight src/main.c -f html -o main.html
  hilite highlight src/main.c -l c -f html -O linenos=table,style=monokai
  hilite highlight - --guess -f terminal256 < snippet.txt
  hilite highlight notes.txt -l text -f text -O tabsize=4 -P ensurenl=false
  hilite styledefs -f html -a .highlight > highlight.css
  hilite config set default_formatter terminal256
  hilite config set-option formatter_options linenos table
"""


class _NoAbbrevArgumentParser(argparse.ArgumentParser):
    """Argparse parser variant that disables long-option abbreviation."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("allow_abbrev", False)
        super().__init__(*args, **kwargs)


def create_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser with all subcommands."""
    parser = _NoAbbrevArgumentParser(
        prog="hilite",
        description="hilite: syntax highlighting through Pygments",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        metavar="FILE",
        help="Config file to use instead of .hilite/config.json",
    )
    sub = parser.add_subparsers(
        dest="command",
        required=True,
        parser_class=_NoAbbrevArgumentParser,
    )
    _add_highlight_parser(sub)
    _add_guess_parser(sub)
    _add_lexers_parser(sub)
    _add_formatters_parser(sub)
    _add_styledefs_parser(sub)
    _add_config_parser(sub)
    return parser


__all__ = ["USAGE_EXAMPLES", "create_parser"]
