"""Error taxonomy shared by the lexer, formatter and context layers."""

from __future__ import annotations


class HighlightConfigError(ValueError):
    """Raised when a highlight context is built without a lexer or formatter.

    This is a programmer error: it is raised before any lexer or formatter
    lookup happens and is never retried.
    """


class MissingLexerError(HighlightConfigError):
    def __init__(self) -> None:
        super().__init__("No lexer configured: supply a lexer or a lexer name")


class MissingFormatterError(HighlightConfigError):
    def __init__(self) -> None:
        super().__init__(
            "No formatter configured: supply a formatter or a formatter name"
        )


class ResolutionError(ValueError):
    """Raised when a lookup key matches nothing registered with Pygments.

    ``key`` holds the exact name, filename or MIME type that failed. The
    underlying ``pygments.util.ClassNotFound`` is chained as ``__cause__``.
    """

    kind = "entry"

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown {self.kind}: {key!r}")


class LexerNotFoundError(ResolutionError):
    kind = "lexer"


class FormatterNotFoundError(ResolutionError):
    kind = "formatter"


__all__ = [
    "FormatterNotFoundError",
    "HighlightConfigError",
    "LexerNotFoundError",
    "MissingFormatterError",
    "MissingLexerError",
    "ResolutionError",
]
