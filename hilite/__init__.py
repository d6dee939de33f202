"""hilite: a small lexer/formatter façade over Pygments."""

from hilite.core.errors import (
    FormatterNotFoundError,
    HighlightConfigError,
    LexerNotFoundError,
    MissingFormatterError,
    MissingLexerError,
    ResolutionError,
)
from hilite.engine import formatters, lexers
from hilite.engine.context import ContextBuilder, HighlightContext, highlight
from hilite.engine.formatters import Formatter
from hilite.engine.lexers import Lexer

__version__ = "0.1.0"

__all__ = [
    "ContextBuilder",
    "Formatter",
    "FormatterNotFoundError",
    "HighlightConfigError",
    "HighlightContext",
    "Lexer",
    "LexerNotFoundError",
    "MissingFormatterError",
    "MissingLexerError",
    "ResolutionError",
    "formatters",
    "highlight",
    "lexers",
]
