"""Formatter selection: resolution strategies and the ``Formatter`` handle."""

from __future__ import annotations

import enum
import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace

import pygments
from pygments import formatters as pygments_formatters
from pygments.formatter import Formatter as PygmentsFormatter
from pygments.util import ClassNotFound

from hilite.core.errors import FormatterNotFoundError
from hilite.engine.options import Options, OptionValue, copy_options

logger = logging.getLogger(__name__)


class FormatterKind(enum.StrEnum):
    NAME = "name"
    FILE = "file"


@dataclass(frozen=True)
class Formatter:
    """Resolved Pygments formatter.

    Pygments formatters may keep bookkeeping on the instance while
    rendering, so ``format`` holds a per-handle lock for the duration of a
    call. Sharing one handle between threads is safe but serialised.

    Copies and pickles are rebuilt from the delegate's class and options,
    each with its own lock.
    """

    delegate: PygmentsFormatter = field(repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    @property
    def name(self) -> str:
        return self.delegate.name

    @property
    def aliases(self) -> tuple[str, ...]:
        return tuple(self.delegate.aliases)

    @property
    def filenames(self) -> tuple[str, ...]:
        return tuple(self.delegate.filenames)

    @property
    def options(self) -> Options:
        return dict(self.delegate.options)

    def format(self, tokens: Iterable[tuple]) -> str:
        """Consume ``tokens`` and return the rendered output as one string."""
        with self._lock:
            output = pygments.format(tokens, self.delegate)
        if isinstance(output, bytes):
            return output.decode(self.delegate.encoding or "utf-8")
        return output

    def style_defs(self, selector: str = "") -> str:
        """Stylesheet definitions (CSS for HTML, macros for LaTeX, else empty)."""
        if selector:
            return self.delegate.get_style_defs(selector)
        return self.delegate.get_style_defs()

    def __reduce__(self):
        return _rebuild_formatter, (type(self.delegate), self.options)

    def __str__(self) -> str:
        return self.name


def _rebuild_formatter(cls: type[PygmentsFormatter], options: Options) -> Formatter:
    return Formatter(cls(**options))


@dataclass(frozen=True)
class FormatterSpec:
    kind: FormatterKind
    key: str
    options: Options = field(default_factory=dict)

    def with_options(
        self, options: Mapping[str, OptionValue] | None = None, /, **extra: OptionValue
    ) -> FormatterSpec:
        merged = copy_options(self.options, **copy_options(options, **extra))
        return replace(self, options=merged)

    def resolve(self) -> Formatter:
        return resolve_formatter(self)


def by_name(name: str, /, **options: OptionValue) -> FormatterSpec:
    """Resolve by formatter name or alias (``"html"``, ``"terminal256"``)."""
    return FormatterSpec(FormatterKind.NAME, name, options)


def for_file(filename: str, /, **options: OptionValue) -> FormatterSpec:
    """Resolve from the intended output filename (``"out.html"``)."""
    return FormatterSpec(FormatterKind.FILE, filename, options)


_RESOLVERS: dict[FormatterKind, Callable[..., PygmentsFormatter]] = {
    FormatterKind.NAME: pygments_formatters.get_formatter_by_name,
    FormatterKind.FILE: pygments_formatters.get_formatter_for_filename,
}


def resolve_formatter(spec: FormatterSpec) -> Formatter:
    """Build a ``Formatter`` handle; raises ``FormatterNotFoundError`` naming ``spec.key``."""
    options = copy_options(spec.options)
    try:
        delegate = _RESOLVERS[spec.kind](spec.key, **options)
    except ClassNotFound as exc:
        raise FormatterNotFoundError(spec.key) from exc
    logger.debug("Resolved formatter %s via %s=%r", delegate.name, spec.kind.value, spec.key)
    return Formatter(delegate)


@dataclass(frozen=True)
class FormatterInfo:
    name: str
    aliases: tuple[str, ...]
    filenames: tuple[str, ...]


def available_formatters() -> list[FormatterInfo]:
    """Return every registered formatter, sorted by name."""
    rows = [
        FormatterInfo(cls.name, tuple(cls.aliases), tuple(cls.filenames))
        for cls in pygments_formatters.get_all_formatters()
    ]
    return sorted(rows, key=lambda info: info.name.lower())


__all__ = [
    "Formatter",
    "FormatterInfo",
    "FormatterKind",
    "FormatterSpec",
    "available_formatters",
    "by_name",
    "for_file",
    "resolve_formatter",
]
