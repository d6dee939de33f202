"""Lexer/formatter resolution and the highlight context."""
