"""CLI parser group builders, one per command family."""

from __future__ import annotations

from hilite.core.config import CONFIG_SCHEMA, OPTION_SECTIONS


def _add_option_flags(parser) -> None:
    """Pygments-style -O (comma-separated) and -P (single) option flags.

    Options go to both the lexer and the formatter; Pygments ignores the
    ones a class does not know.
    """
    parser.add_argument(
        "-O",
        dest="options",
        action="append",
        default=None,
        metavar="KEY=VALUE[,KEY=VALUE]",
        help="Lexer/formatter options (repeatable, comma-separated)",
    )
    parser.add_argument(
        "-P",
        dest="option",
        action="append",
        default=None,
        metavar="KEY=VALUE",
        help="Single option; value may contain commas (repeatable)",
    )


def _add_highlight_parser(sub) -> None:
    p = sub.add_parser("highlight", help="Highlight a file or stdin")
    p.add_argument("input", help="Source file, or - for stdin")
    p.add_argument("-l", "--lexer", type=str, default=None, help="Lexer name or alias")
    p.add_argument(
        "-f", "--formatter", type=str, default=None, help="Formatter name or alias"
    )
    p.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        metavar="FILE",
        help="Write to FILE; also picks the formatter from its extension if -f is omitted",
    )
    p.add_argument(
        "-g",
        "--guess",
        action="store_true",
        help="Guess the lexer from content when the filename gives no match",
    )
    _add_option_flags(p)


def _add_guess_parser(sub) -> None:
    p = sub.add_parser("guess", help="Print the lexer picked for a file or stdin")
    p.add_argument("input", help="Source file, or - for stdin")


def _add_lexers_parser(sub) -> None:
    p = sub.add_parser("lexers", help="List registered lexers")
    p.add_argument("--json", action="store_true", help="Emit JSON instead of a table")


def _add_formatters_parser(sub) -> None:
    p = sub.add_parser("formatters", help="List registered formatters")
    p.add_argument("--json", action="store_true", help="Emit JSON instead of a table")


def _add_styledefs_parser(sub) -> None:
    p = sub.add_parser("styledefs", help="Print stylesheet definitions for a formatter")
    p.add_argument(
        "-f", "--formatter", type=str, default=None, help="Formatter name (default: config)"
    )
    p.add_argument(
        "-a", "--selector", type=str, default="", help="CSS selector / prefix argument"
    )
    _add_option_flags(p)


def _add_config_parser(sub) -> None:
    p_config = sub.add_parser("config", help="Show/set/unset project configuration")
    config_sub = p_config.add_subparsers(dest="config_action")
    config_sub.add_parser("show", help="Show all config values")
    c_set = config_sub.add_parser("set", help="Set a config value")
    c_set.add_argument("config_key", choices=sorted(CONFIG_SCHEMA), help="Config key name")
    c_set.add_argument("config_value", type=str, help="Value to set")
    c_unset = config_sub.add_parser("unset", help="Reset a config key to default")
    c_unset.add_argument("config_key", choices=sorted(CONFIG_SCHEMA), help="Config key name")
    o_set = config_sub.add_parser("set-option", help="Set a lexer/formatter option")
    o_set.add_argument("section", choices=OPTION_SECTIONS)
    o_set.add_argument("option_key", type=str, help="Option name")
    o_set.add_argument("option_value", type=str, help="Option value (true/false/int/text)")
    o_unset = config_sub.add_parser("unset-option", help="Remove a lexer/formatter option")
    o_unset.add_argument("section", choices=OPTION_SECTIONS)
    o_unset.add_argument("option_key", type=str, help="Option name")


__all__ = [
    "_add_config_parser",
    "_add_formatters_parser",
    "_add_guess_parser",
    "_add_highlight_parser",
    "_add_lexers_parser",
    "_add_styledefs_parser",
]
