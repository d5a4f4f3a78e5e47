"""Token definition for the lexico lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token has a caller-defined kind, the exact matched text, and its
position in the source.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
This avoids allocating SourceLocation objects for tokens whose location
is never accessed (most tokens during parsing).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from lexico.location import SourceLocation

K = TypeVar("K")


@dataclass(frozen=True, slots=True)
class Token(Generic[K]):
    """A token produced by the lexer.

    Attributes:
        kind: Value built by the matcher's constructor (an enum member,
            a dataclass instance, ...)
        text: The exact substring that was matched
        start: Start offset in source
        end: End offset in source (exclusive); always start + len(text)
        lineno: Line of ``start`` (1-indexed)
        col: Column of ``start`` (1-indexed)
        end_lineno: Line of ``end``
        end_col: Column of ``end``
        source_file: Optional source file path

    Performance:
        SourceLocation is created lazily on first access to `.location`.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    kind: K
    text: str
    start: int
    end: int
    lineno: int = 1
    col: int = 1
    end_lineno: int | None = None
    end_col: int | None = None
    source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached).

        Returns:
            SourceLocation object for this token.
        """
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from lexico.location import SourceLocation

        loc = SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            offset=self.start,
            end_offset=self.end,
            end_lineno=self.end_lineno,
            end_col_offset=self.end_col,
            source_file=self.source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        return f"Token({self.kind!r}, {text!r}, {self.start}-{self.end})"
