"""CLI entry point: argparse, subcommand routing, top-level error reporting."""

from __future__ import annotations

import sys

from hilite.app.cli_support.parser import create_parser
from hilite.app.commands.registry import COMMAND_HANDLERS
from hilite.core.errors import HighlightConfigError, ResolutionError
from hilite.core.fallbacks import print_error


def main(argv: list[str] | None = None) -> None:
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        COMMAND_HANDLERS[args.command](args)
    except (ResolutionError, HighlightConfigError) as exc:
        print_error(str(exc))
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(1)


__all__ = ["create_parser", "main"]


if __name__ == "__main__":
    main()
