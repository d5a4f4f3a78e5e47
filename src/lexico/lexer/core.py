"""Table-driven lexer.

Scans the source left to right. At each position the matcher table is
consulted through the configured resolver; the winning match is either
skipped or turned into a Token, and the cursor moves past it.

Lexing stops at the end of input or at the first error. Errors are raised,
never recovered from; their position lets the caller decide what to do.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state. The matcher table
is immutable and may be shared by lexers on different threads.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from lexico.config import LexConfig, get_lex_config
from lexico.errors import ConstructorError, LexError, UnrecognizedInputError
from lexico.lexer.modes import LexerState
from lexico.lexer.resolution import RESOLVERS
from lexico.matchers import MatcherTable
from lexico.tokens import Token
from lexico.utils.logger import get_logger
from lexico.utils.text import advance_position, visible_snippet

logger = get_logger(__name__)


class Lexer:
    """Table-driven lexer over one source string.

    The lexer is an iterator of Token. Iteration ends cleanly when the input
    is exhausted (trailing skip-only content is fine), or by raising a
    LexError. Either way the lexer is then HALTED and yields nothing more;
    lex the same text again with a new Lexer.

    Usage:
        >>> from lexico import MatcherTable, regex
        >>> table = MatcherTable.from_pairs([
        ...     (int, regex(r"\\d+")),
        ...     ("+", "+"),
        ...     (None, regex(r"\\s+")),
        ... ])
        >>> for token in Lexer("1 + 23", table):
        ...     print(token)
        Token(1, '1', 0-1)
        Token('+', '+', 2-3)
        Token(23, '23', 4-6)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_table",
        "_matchers",  # Cached table.matchers tuple
        "_resolve",
        "_config",
        "_source_file",
        "_pos",
        "_lineno",
        "_col",
        "_state",
    )

    def __init__(
        self,
        source: str,
        table: MatcherTable | Iterable[tuple[Any, Any]],
        *,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text and matchers.

        Args:
            source: Source text
            table: MatcherTable, or ``(constructor, pattern)`` pairs in
                priority order
            source_file: Optional source file path for error messages
            config: Configuration; defaults to the active context config

        Raises:
            TypeError: If source is not a str
            InvalidPatternError: If pairs contain an unusable pattern
        """
        if not isinstance(source, str):
            msg = f"source must be str, got {type(source).__name__}"
            raise TypeError(msg)
        if not isinstance(table, MatcherTable):
            table = MatcherTable.from_pairs(table)
        if config is None:
            config = get_lex_config()

        self._source = source
        self._source_len = len(source)
        self._table = table
        self._matchers = table.matchers
        self._resolve = RESOLVERS[config.resolution]
        self._config = config
        self._source_file = source_file

        # Cursor
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._state = LexerState.SCANNING

    # =========================================================================
    # Iteration
    # =========================================================================

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        """Scan to the next token.

        Raises:
            StopIteration: At end of input, or once halted
            UnrecognizedInputError: If no matcher matches at the cursor
            ConstructorError: If the winning matcher's constructor fails
        """
        if self._state is LexerState.HALTED:
            raise StopIteration

        source = self._source
        while self._pos < self._source_len:
            pos = self._pos
            resolved = self._resolve(self._matchers, source, pos)
            if resolved is None:
                raise self._fail(
                    UnrecognizedInputError(
                        visible_snippet(source, pos, self._config.snippet_width),
                        pos,
                        self._lineno,
                        self._col,
                        self._source_file,
                    )
                )

            matcher, length = resolved
            end = pos + length
            text = source[pos:end]

            if matcher.create is None:
                self._advance(text, end)
                continue

            try:
                kind = matcher.create(text)
            except Exception as e:
                raise self._fail(
                    ConstructorError(
                        text, e, pos, self._lineno, self._col, self._source_file
                    )
                ) from e

            lineno, col = self._lineno, self._col
            self._advance(text, end)
            return Token(
                kind=kind,
                text=text,
                start=pos,
                end=end,
                lineno=lineno,
                col=col,
                end_lineno=self._lineno,
                end_col=self._col,
                source_file=self._source_file,
            )

        self._state = LexerState.HALTED
        raise StopIteration

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time

        Raises:
            LexError: On the first position that cannot be lexed

        Complexity: O(n * m) pattern calls for n characters and m matchers
        Memory: O(1) iterator (tokens yielded, not accumulated)
        """
        yield from self

    def collect(self) -> list[Token]:
        """Tokenize the remaining source eagerly.

        Returns:
            All tokens in source order

        Raises:
            LexError: The first error encountered; no partial list is returned
        """
        return list(self)

    # =========================================================================
    # Cursor helpers
    # =========================================================================

    def _advance(self, text: str, end: int) -> None:
        self._lineno, self._col = advance_position(text, self._lineno, self._col)
        self._pos = end

    def _fail(self, error: LexError) -> LexError:
        """Halt the lexer and hand back ``error`` for raising."""
        self._state = LexerState.HALTED
        logger.debug("Lexing halted at offset %d: %s", self._pos, error)
        return error

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def source(self) -> str:
        """The text being lexed."""
        return self._source

    @property
    def table(self) -> MatcherTable:
        """The matcher table in use."""
        return self._table

    @property
    def config(self) -> LexConfig:
        """Configuration captured when the lexer was created."""
        return self._config

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def offset(self) -> int:
        """Current cursor offset."""
        return self._pos

    @property
    def lineno(self) -> int:
        """Current cursor line (1-indexed)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Current cursor column (1-indexed)."""
        return self._col

    @property
    def state(self) -> LexerState:
        return self._state

    @property
    def halted(self) -> bool:
        return self._state is LexerState.HALTED

    def __repr__(self) -> str:
        return (
            f"<Lexer {self._state.name} at {self._lineno}:{self._col} "
            f"({self._pos}/{self._source_len})>"
        )
