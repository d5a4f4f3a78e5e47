"""
lexico: table-driven lexical analysis for Python

Turns source text into typed, positioned tokens using an ordered table of
literal and regex matchers. Earlier matchers win. Skip matchers swallow
whitespace and comments. The first unlexable position is reported precisely.

Quick Start:
    >>> from lexico import SKIP, lex, regex
    >>> tokens = lex("1 + 23", [
    ...     (int, regex(r"\\d+")),
    ...     ("plus", "+"),
    ...     (SKIP, regex(r"\\s+")),
    ... ])
    >>> [(t.kind, t.start, t.end) for t in tokens]
    [(1, 0, 1), ('plus', 2, 3), (23, 4, 6)]

    >>> # Or build a reusable table
    >>> from lexico import MatcherTableBuilder
    >>> table = MatcherTableBuilder().token(int, regex(r"\\d+")).skip(" ").build()
    >>> [t.kind for t in table.tokenize("4 2")]
    [4, 2]

Installation:
    pip install lexico               # Zero runtime dependencies
"""

from collections.abc import Iterable, Iterator
from typing import Any

from lexico.config import (
    LexConfig,
    Resolution,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from lexico.errors import (
    ConstructorError,
    InvalidPatternError,
    LexError,
    LexicoError,
    UnrecognizedInputError,
)
from lexico.lexer import Lexer, LexerState
from lexico.location import SourceLocation
from lexico.matchers import SKIP, Matcher, MatcherTable, MatcherTableBuilder, fixed
from lexico.patterns import Literal, Pattern, Regex, as_pattern, literal, regex
from lexico.tokens import Token

__version__ = "0.1.0"


def tokenize(
    source: str,
    matchers: MatcherTable | Iterable[tuple[Any, Any]],
    *,
    source_file: str | None = None,
) -> Iterator[Token]:
    """Lazily tokenize source.

    Args:
        source: Source text
        matchers: MatcherTable, or ``(constructor, pattern)`` pairs in
            priority order
        source_file: Optional source file path for error messages

    Returns:
        Iterator of tokens. Raises LexError when it reaches a position
        that cannot be lexed.

    Raises:
        InvalidPatternError: Immediately, if a pattern is unusable
    """
    return Lexer(source, matchers, source_file=source_file).tokenize()


def lex(
    source: str,
    matchers: MatcherTable | Iterable[tuple[Any, Any]],
    *,
    source_file: str | None = None,
) -> list[Token]:
    """Tokenize all of source.

    Args:
        source: Source text
        matchers: MatcherTable, or ``(constructor, pattern)`` pairs in
            priority order
        source_file: Optional source file path for error messages

    Returns:
        All tokens in source order

    Raises:
        InvalidPatternError: If a pattern is unusable
        LexError: The first error encountered

    Example:
        >>> lex("ab", [("a", "a")])
        Traceback (most recent call last):
        ...
        lexico.errors.UnrecognizedInputError: 1:2 Unexpected input at position 1: 'b'
    """
    return Lexer(source, matchers, source_file=source_file).collect()


__all__ = [
    # Main API
    "lex",
    "tokenize",
    "Lexer",
    "LexerState",
    # Matchers
    "SKIP",
    "Matcher",
    "MatcherTable",
    "MatcherTableBuilder",
    "fixed",
    # Patterns
    "Literal",
    "Pattern",
    "Regex",
    "as_pattern",
    "literal",
    "regex",
    # Tokens
    "Token",
    "SourceLocation",
    # Configuration
    "LexConfig",
    "Resolution",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "LexicoError",
    "LexError",
    "UnrecognizedInputError",
    "ConstructorError",
    "InvalidPatternError",
    # Version
    "__version__",
]
