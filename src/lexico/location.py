"""Line and column rendering of source offsets.

The lexer measures everything in code point offsets. SourceLocation turns a
span of offsets into the 1-indexed line and column form used in diagnostics,
for tokens (``Token.location``), errors (``LexError.location``) and for
parsers that build nodes out of several tokens (``span_to``).

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from lexico.utils.text import advance_position


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a span of source text sits.

    Attributes:
        lineno: Line of the span start (1-indexed)
        col_offset: Column of the span start (1-indexed)
        offset: Start offset in the source string
        end_offset: End offset (exclusive)
        end_lineno: Line of the span end, if known
        end_col_offset: Column of the span end, if known
        source_file: Name used in diagnostics, if any

    Examples:
        >>> str(SourceLocation(lineno=1, col_offset=1))
        '1:1'
        >>> str(SourceLocation(2, 5, source_file="calc.txt"))
        'calc.txt:2:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    @classmethod
    def from_offset(
        cls,
        source: str,
        offset: int,
        end_offset: int | None = None,
        source_file: str | None = None,
    ) -> SourceLocation:
        """Locate ``source[offset:end_offset]`` by scanning from the start.

        Useful for positions that did not come from a token, such as an
        offset a parser computed on its own.

        Raises:
            ValueError: If the offsets fall outside ``source``

        Example:
            >>> loc = SourceLocation.from_offset("ab\\ncd", 4, 5)
            >>> (loc.lineno, loc.col_offset, loc.end_lineno, loc.end_col_offset)
            (2, 2, 2, 3)
        """
        if end_offset is None:
            end_offset = offset
        if not 0 <= offset <= end_offset <= len(source):
            msg = f"span {offset}-{end_offset} is outside a source of length {len(source)}"
            raise ValueError(msg)

        lineno, col = advance_position(source[:offset], 1, 1)
        end_lineno, end_col = advance_position(source[offset:end_offset], lineno, col)
        return cls(
            lineno=lineno,
            col_offset=col,
            offset=offset,
            end_offset=end_offset,
            end_lineno=end_lineno,
            end_col_offset=end_col,
            source_file=source_file,
        )

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Join this location with a later one.

        The result starts where this location starts and ends where ``end``
        ends; parsers use it to locate a node built from several tokens.
        """
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            end_lineno=end.end_lineno or end.lineno,
            end_col_offset=end.end_col_offset or end.col_offset,
            source_file=self.source_file,
        )
