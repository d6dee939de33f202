"""Option maps for lexer/formatter resolution.

Options are passed to Pygments verbatim as keyword arguments. Raw
``key=value`` strings (CLI flags, config edits) stay strings: Pygments parses
them itself (``get_int_opt``, ``get_bool_opt``, ``get_list_opt``), the same
way it handles ``pygmentize -O``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

OptionValue = str | bool | int
Options = dict[str, OptionValue]


def copy_options(
    options: Mapping[str, OptionValue] | None = None, /, **extra: OptionValue
) -> Options:
    """Return a fresh options dict; ``extra`` entries override ``options``."""
    merged: Options = dict(options or {})
    merged.update(extra)
    return merged


def parse_option(raw: str) -> tuple[str, OptionValue]:
    """Parse one ``key=value`` pair. A bare ``key`` means ``key=True``."""
    if "=" not in raw:
        key = raw.strip()
        value: OptionValue = True
    else:
        key, _, rest = raw.partition("=")
        key = key.strip()
        value = rest.strip()
    if not key:
        raise ValueError(f"Expected key=value option, got: {raw!r}")
    return key, value


def parse_options(raws: Iterable[str] | None) -> Options:
    """Parse repeated ``key=value`` flags; comma-separated pairs are split too."""
    options: Options = {}
    for raw in raws or ():
        for part in raw.split(","):
            if not part.strip():
                continue
            key, value = parse_option(part)
            options[key] = value
    return options


__all__ = [
    "OptionValue",
    "Options",
    "copy_options",
    "parse_option",
    "parse_options",
]
