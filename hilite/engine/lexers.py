"""Lexer selection: resolution strategies and the immutable ``Lexer`` handle.

A ``LexerSpec`` records *how* to find a lexer (by name, filename, MIME type
or by sniffing content) together with the options to build it with.
``resolve_lexer`` is the single entry point that turns a spec into a handle.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field, replace

from pygments import lexers as pygments_lexers
from pygments.lexer import Lexer as PygmentsLexer
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

from hilite.core.errors import LexerNotFoundError
from hilite.core.fallbacks import log_best_effort_failure
from hilite.engine.options import Options, OptionValue, copy_options

logger = logging.getLogger(__name__)


class LexerKind(enum.StrEnum):
    NAME = "name"
    FILE = "file"
    MIME = "mime"
    GUESS = "guess"
    GUESS_FOR_FILE = "guess_for_file"


@dataclass(frozen=True)
class Lexer:
    """Resolved Pygments lexer. Safe to share across highlight calls."""

    delegate: PygmentsLexer = field(repr=False)

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
    def mimetypes(self) -> tuple[str, ...]:
        return tuple(self.delegate.mimetypes)

    @property
    def options(self) -> Options:
        return dict(self.delegate.options)

    def lex(self, text: str) -> Iterator[tuple]:
        """Tokenize ``text``. The returned generator is single-pass."""
        return self.delegate.get_tokens(text)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class LexerSpec:
    """How to resolve a lexer: strategy kind, lookup key, sample text, options."""

    kind: LexerKind
    key: str | None = None
    text: str | None = None
    options: Options = field(default_factory=dict)

    def with_options(
        self, options: Mapping[str, OptionValue] | None = None, /, **extra: OptionValue
    ) -> LexerSpec:
        merged = copy_options(self.options, **copy_options(options, **extra))
        return replace(self, options=merged)

    def resolve(self) -> Lexer:
        return resolve_lexer(self)


# ── Spec constructors ──────────────────────────────────────


def by_name(name: str, /, **options: OptionValue) -> LexerSpec:
    """Resolve by language name or alias (``"c"``, ``"python3"``)."""
    return LexerSpec(LexerKind.NAME, key=name, options=options)


def for_file(filename: str, /, **options: OptionValue) -> LexerSpec:
    """Resolve from filename patterns (``"main.c"``)."""
    return LexerSpec(LexerKind.FILE, key=filename, options=options)


def for_mime(mimetype: str, /, **options: OptionValue) -> LexerSpec:
    """Resolve from a registered MIME type (``"text/x-csrc"``)."""
    return LexerSpec(LexerKind.MIME, key=mimetype, options=options)


def guess(text: str, /, **options: OptionValue) -> LexerSpec:
    """Pick the best-scoring lexer for ``text``; falls back to plain text."""
    return LexerSpec(LexerKind.GUESS, text=text, options=options)


def guess_for_file(filename: str, text: str, /, **options: OptionValue) -> LexerSpec:
    """Like ``guess`` but restricted to lexers matching ``filename``."""
    return LexerSpec(LexerKind.GUESS_FOR_FILE, key=filename, text=text, options=options)


# ── Resolution ─────────────────────────────────────────────


def _guess_with_fallback(spec: LexerSpec, options: Options) -> PygmentsLexer:
    try:
        return pygments_lexers.guess_lexer(spec.text or "", **options)
    except ClassNotFound as exc:
        log_best_effort_failure(logger, "guess a lexer from content", exc)
        return TextLexer(**options)


_RESOLVERS: dict[LexerKind, Callable[[LexerSpec, Options], PygmentsLexer]] = {
    LexerKind.NAME: lambda spec, opts: pygments_lexers.get_lexer_by_name(spec.key, **opts),
    LexerKind.FILE: lambda spec, opts: pygments_lexers.get_lexer_for_filename(spec.key, **opts),
    LexerKind.MIME: lambda spec, opts: pygments_lexers.get_lexer_for_mimetype(spec.key, **opts),
    LexerKind.GUESS: _guess_with_fallback,
    LexerKind.GUESS_FOR_FILE: lambda spec, opts: pygments_lexers.guess_lexer_for_filename(
        spec.key, spec.text or "", **opts
    ),
}


def resolve_lexer(spec: LexerSpec) -> Lexer:
    """Build a ``Lexer`` handle from ``spec``.

    Raises ``LexerNotFoundError`` naming ``spec.key`` when Pygments has no
    match. Unguided guessing never raises it.
    """
    options = copy_options(spec.options)
    try:
        delegate = _RESOLVERS[spec.kind](spec, options)
    except ClassNotFound as exc:
        raise LexerNotFoundError(spec.key) from exc
    logger.debug("Resolved lexer %s via %s=%r", delegate.name, spec.kind.value, spec.key)
    return Lexer(delegate)


# ── Registry listing ───────────────────────────────────────


@dataclass(frozen=True)
class LexerInfo:
    name: str
    aliases: tuple[str, ...]
    filenames: tuple[str, ...]
    mimetypes: tuple[str, ...]


def available_lexers() -> list[LexerInfo]:
    """Return every registered lexer (builtin and plugin), sorted by name."""
    rows = [
        LexerInfo(name, tuple(aliases), tuple(filenames), tuple(mimetypes))
        for name, aliases, filenames, mimetypes in pygments_lexers.get_all_lexers()
    ]
    return sorted(rows, key=lambda info: info.name.lower())


__all__ = [
    "Lexer",
    "LexerInfo",
    "LexerKind",
    "LexerSpec",
    "available_lexers",
    "by_name",
    "for_file",
    "for_mime",
    "guess",
    "guess_for_file",
    "resolve_lexer",
]
