"""highlight / guess / styledefs commands."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from hilite.app.commands.helpers.runtime import cli_options, command_runtime
from hilite.core.errors import LexerNotFoundError
from hilite.core.fallbacks import print_error
from hilite.engine import formatters as formatter_api
from hilite.engine import lexers as lexer_api
from hilite.engine.context import HighlightContext
from hilite.engine.formatters import Formatter
from hilite.engine.lexers import Lexer
from hilite.engine.options import Options, copy_options
from hilite.utils import colorize, safe_write_text

logger = logging.getLogger(__name__)

STDIN = "-"
_DETECT_MODES = frozenset({"guess", "chardet"})


def _input_encoding(options: Options) -> str:
    """Codec for file input: ``inencoding``, then ``encoding``, then utf-8.

    Pygments' detection modes (``guess``, ``chardet``) read as utf-8.
    """
    for key in ("inencoding", "encoding"):
        value = options.get(key)
        if isinstance(value, str) and value and value not in _DETECT_MODES:
            return value
    return "utf-8"


def _read_input(source: str, encoding: str = "utf-8") -> str:
    """Read a file (or stdin) as text. Undecodable bytes are an error."""
    try:
        if source == STDIN:
            return sys.stdin.read()
        return Path(source).read_bytes().decode(encoding)
    except UnicodeDecodeError as exc:
        print_error(
            f"could not decode {source} as {exc.encoding}: {exc.reason} at byte {exc.start}"
            " (pass -P inencoding=CODEC)"
        )
        sys.exit(1)
    except (OSError, LookupError) as exc:
        print_error(f"could not read {source}: {exc}")
        sys.exit(1)


def _pick_lexer(
    args: argparse.Namespace, config: dict, text: str, options: Options
) -> Lexer:
    """-l wins, then the configured default, then filename/content guessing."""
    name = getattr(args, "lexer", None) or config["default_lexer"]
    if name:
        return lexer_api.by_name(name, **options).resolve()
    if args.input == STDIN:
        return lexer_api.guess(text, **options).resolve()
    try:
        return lexer_api.guess_for_file(Path(args.input).name, text, **options).resolve()
    except LexerNotFoundError:
        if not getattr(args, "guess", False):
            raise
        logger.debug("No lexer for %s by filename, guessing from content", args.input)
        return lexer_api.guess(text, **options).resolve()


def _pick_formatter(args: argparse.Namespace, config: dict, options: Options) -> Formatter:
    """-f wins, then the output file's extension, then the configured default."""
    if args.formatter:
        return formatter_api.by_name(args.formatter, **options).resolve()
    if getattr(args, "output", None):
        return formatter_api.for_file(args.output, **options).resolve()
    return formatter_api.by_name(config["default_formatter"], **options).resolve()


def cmd_highlight(args: argparse.Namespace) -> None:
    """Render a file (or stdin) and write it to stdout or --output."""
    config = command_runtime(args).config
    flags = cli_options(args)
    lexer_options = copy_options(config["lexer_options"], **flags)
    text = _read_input(args.input, _input_encoding(lexer_options))
    lexer = _pick_lexer(args, config, text, lexer_options)
    formatter = _pick_formatter(
        args, config, copy_options(config["formatter_options"], **flags)
    )
    context = HighlightContext.builder().lexer(lexer).formatter(formatter).build()
    output = context.highlight(text)

    if args.output:
        safe_write_text(args.output, output)
        print(
            colorize(f"  Wrote {args.output} ({lexer.name} → {formatter.name})", "green"),
            file=sys.stderr,
        )
        return
    sys.stdout.write(output)


def cmd_guess(args: argparse.Namespace) -> None:
    """Print the display name of the lexer guessed for a file or stdin."""
    text = _read_input(args.input)
    if args.input == STDIN:
        lexer = lexer_api.guess(text).resolve()
    else:
        try:
            lexer = lexer_api.guess_for_file(Path(args.input).name, text).resolve()
        except LexerNotFoundError:
            lexer = lexer_api.guess(text).resolve()
    print(lexer.name)


def cmd_styledefs(args: argparse.Namespace) -> None:
    """Print stylesheet definitions (CSS for html) for a formatter."""
    config = command_runtime(args).config
    options = copy_options(config["formatter_options"], **cli_options(args))
    name = args.formatter or config["default_formatter"]
    formatter = formatter_api.by_name(name, **options).resolve()
    print(formatter.style_defs(args.selector))


__all__ = ["cmd_guess", "cmd_highlight", "cmd_styledefs"]
