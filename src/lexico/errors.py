"""Exception classes for lexico.

Two families of errors exist:

- LexError and its subclasses are raised while scanning. They are terminal
  for the pass and carry the offset where scanning stopped, so callers can
  implement their own recovery.
- InvalidPatternError is raised while building a matcher table, before any
  input is scanned.
"""

from __future__ import annotations

from lexico.location import SourceLocation


class LexicoError(Exception):
    """Base exception for all lexico errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(LexicoError):
    """Error during lexing.

    Raised when the lexer cannot continue at some position in the source.
    """

    def __init__(
        self,
        message: str,
        position: int,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with its location.

        Args:
            message: Error description
            position: Offset into the source where scanning stopped
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.position = position
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @property
    def location(self) -> SourceLocation | None:
        """Where scanning stopped, or None if the line is unknown."""
        if self.lineno is None:
            return None
        col = self.col_offset or 1
        return SourceLocation(
            lineno=self.lineno,
            col_offset=col,
            offset=self.position,
            end_offset=self.position,
            end_lineno=self.lineno,
            end_col_offset=col,
            source_file=self.source_file,
        )


class UnrecognizedInputError(LexError):
    """No matcher accepts the input at the current position."""

    def __init__(
        self,
        snippet: str,
        position: int,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize unrecognized input error.

        Args:
            snippet: Quoted text found at ``position``
            position: Offset of the first unrecognized character
            lineno: Line number (1-indexed)
            col_offset: Column offset (1-indexed)
            source_file: Path to source file (optional)
        """
        self.snippet = snippet
        super().__init__(
            f"Unexpected input at position {position}: {snippet}",
            position,
            lineno,
            col_offset,
            source_file,
        )


class ConstructorError(LexError):
    """A token constructor failed to interpret its matched text.

    The original exception is available as ``cause`` and is also chained
    as ``__cause__``.
    """

    def __init__(
        self,
        text: str,
        cause: BaseException,
        position: int,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize constructor error.

        Args:
            text: The matched text handed to the constructor
            cause: Exception raised by the constructor
            position: Offset where the match started
            lineno: Line number (1-indexed)
            col_offset: Column offset (1-indexed)
            source_file: Path to source file (optional)
        """
        self.text = text
        self.cause = cause
        super().__init__(
            f"Error parsing token {text!r} at position {position}: {cause}",
            position,
            lineno,
            col_offset,
            source_file,
        )


class InvalidPatternError(LexicoError, ValueError):
    """A matcher pattern cannot be used.

    Raised at table-build time for regex syntax errors, empty literals and
    expressions that can match the empty string.
    """

    def __init__(self, pattern: object, message: str) -> None:
        """Initialize invalid pattern error.

        Args:
            pattern: The offending pattern (string, expression or object)
            message: Description of the problem
        """
        self.pattern = pattern
        super().__init__(f"Invalid pattern {pattern!r}: {message}")
