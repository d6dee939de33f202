"""Highlight context: a resolved lexer + formatter pair behind one call.

    ctx = (
        HighlightContext.builder()
        .lexer_name("c")
        .formatter_name("html")
        .formatter_option("linenos", "table")
        .build()
    )
    html = ctx.highlight(source)

Each slot takes either a pre-built handle or a name plus options. When both
are supplied the handle wins and the name/options are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from hilite.core.errors import MissingFormatterError, MissingLexerError
from hilite.engine import formatters as formatter_api
from hilite.engine import lexers as lexer_api
from hilite.engine.formatters import Formatter
from hilite.engine.lexers import Lexer
from hilite.engine.options import Options, OptionValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HighlightContext:
    lexer: Lexer
    formatter: Formatter

    @staticmethod
    def builder() -> ContextBuilder:
        return ContextBuilder()

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, Any],
        *,
        lexer: Lexer | None = None,
        formatter: Formatter | None = None,
    ) -> HighlightContext:
        """Build from project config defaults (see ``hilite.core.config``).

        Explicit ``lexer``/``formatter`` handles take precedence over the
        configured names, as in the builder.
        """
        return (
            cls.builder()
            .lexer(lexer)
            .lexer_name(config.get("default_lexer") or None)
            .lexer_options(config.get("lexer_options") or {})
            .formatter(formatter)
            .formatter_name(config.get("default_formatter") or None)
            .formatter_options(config.get("formatter_options") or {})
            .build()
        )

    def highlight(self, text: str) -> str:
        return self.formatter.format(self.lexer.lex(text))


class ContextBuilder:
    """Single-use builder collecting lexer/formatter selection before ``build``."""

    def __init__(self) -> None:
        self._lexer: Lexer | None = None
        self._lexer_name: str | None = None
        self._lexer_options: Options = {}
        self._formatter: Formatter | None = None
        self._formatter_name: str | None = None
        self._formatter_options: Options = {}

    def lexer(self, lexer: Lexer | None) -> ContextBuilder:
        self._lexer = lexer
        return self

    def lexer_name(self, name: str | None) -> ContextBuilder:
        self._lexer_name = name
        return self

    def lexer_option(self, key: str, value: OptionValue) -> ContextBuilder:
        self._lexer_options[key] = value
        return self

    def lexer_options(self, options: Mapping[str, OptionValue]) -> ContextBuilder:
        self._lexer_options.update(options)
        return self

    def formatter(self, formatter: Formatter | None) -> ContextBuilder:
        self._formatter = formatter
        return self

    def formatter_name(self, name: str | None) -> ContextBuilder:
        self._formatter_name = name
        return self

    def formatter_option(self, key: str, value: OptionValue) -> ContextBuilder:
        self._formatter_options[key] = value
        return self

    def formatter_options(self, options: Mapping[str, OptionValue]) -> ContextBuilder:
        self._formatter_options.update(options)
        return self

    def build(self) -> HighlightContext:
        """Resolve both slots. Missing slots fail before any lookup happens."""
        if self._lexer is None and self._lexer_name is None:
            raise MissingLexerError()
        if self._formatter is None and self._formatter_name is None:
            raise MissingFormatterError()
        return HighlightContext(self._build_lexer(), self._build_formatter())

    def _build_lexer(self) -> Lexer:
        if self._lexer is not None:
            if self._lexer_name is not None:
                logger.debug(
                    "Lexer handle %s overrides lexer name %r", self._lexer.name, self._lexer_name
                )
            return self._lexer
        return lexer_api.by_name(self._lexer_name, **self._lexer_options).resolve()

    def _build_formatter(self) -> Formatter:
        if self._formatter is not None:
            if self._formatter_name is not None:
                logger.debug(
                    "Formatter handle %s overrides formatter name %r",
                    self._formatter.name,
                    self._formatter_name,
                )
            return self._formatter
        return formatter_api.by_name(self._formatter_name, **self._formatter_options).resolve()


def highlight(text: str, lexer: Lexer, formatter: Formatter) -> str:
    """One-shot highlight with already resolved handles."""
    return HighlightContext(lexer, formatter).highlight(text)


__all__ = ["ContextBuilder", "HighlightContext", "highlight"]
