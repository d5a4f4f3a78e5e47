"""Matchers and the matcher table.

A matcher pairs a pattern with a token constructor. The table holds matchers
in priority order: lower index means higher priority.

A constructor is one of:
- SKIP (or None): consume the match, emit nothing (whitespace, comments)
- a callable taking the matched text and returning the token kind; it may
  raise, which the lexer reports as a ConstructorError
- any other value: a fixed kind produced for every match

Classes are callable, so ``(Ident, regex(r"\\w+"))`` builds ``Ident(text)``.
Wrap a callable in ``fixed()`` to use it as a fixed kind instead.

Thread Safety:
MatcherTable is immutable after creation. Safe to share.
Use MatcherTableBuilder for mutable construction.

Example:
    >>> from lexico.patterns import regex
    >>> table = (
    ...     MatcherTableBuilder()
    ...     .token(int, regex(r"\\d+"))
    ...     .token("plus", "+")
    ...     .skip(regex(r"\\s+"))
    ...     .build()
    ... )
    >>> [t.kind for t in table.tokenize("1 + 2")]
    [1, 'plus', 2]
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from lexico.patterns import Literal, Pattern, as_pattern
from lexico.utils.logger import get_logger

if TYPE_CHECKING:
    import re

    from lexico.config import LexConfig
    from lexico.lexer import Lexer
    from lexico.tokens import Token

logger = get_logger(__name__)


class _Skip:
    """Sentinel constructor for matches that emit no token."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "SKIP"

    def __reduce__(self) -> str:
        return "SKIP"


SKIP: Final = _Skip()


@dataclass(frozen=True, slots=True)
class Fixed:
    """Constructor that ignores the matched text and returns ``value``."""

    value: Any

    def __call__(self, text: str) -> Any:
        return self.value


def fixed(value: Any) -> Fixed:
    """Use ``value`` as a fixed token kind, even if it is callable."""
    return Fixed(value)


type PatternSpec = str | re.Pattern[str] | Pattern
type ConstructorSpec = Callable[[str], Any] | Any


@dataclass(frozen=True, slots=True)
class Matcher:
    """A pattern and the constructor that turns its matches into kinds.

    Attributes:
        pattern: Pattern tried at the cursor
        create: Callable building the token kind, or None to skip
    """

    pattern: Pattern
    create: Callable[[str], Any] | None

    @classmethod
    def of(cls, constructor: ConstructorSpec, pattern: PatternSpec) -> Matcher:
        """Build a matcher from a constructor spec and a pattern spec.

        Raises:
            InvalidPatternError: If the pattern is unusable
        """
        if constructor is None or constructor is SKIP:
            create = None
        elif callable(constructor):
            create = constructor
        else:
            create = Fixed(constructor)
        return cls(as_pattern(pattern), create)

    @property
    def skips(self) -> bool:
        """True if matches are consumed without emitting a token."""
        return self.create is None

    def __repr__(self) -> str:
        if self.create is None:
            target = "SKIP"
        elif isinstance(self.create, Fixed):
            target = repr(self.create.value)
        else:
            target = getattr(self.create, "__qualname__", repr(self.create))
        return f"Matcher({self.pattern}, {target})"


class MatcherTable:
    """Immutable, priority-ordered sequence of matchers.

    Thread Safety:
        Immutable after creation. Safe to share across threads and
        across any number of lexers.
    """

    __slots__ = ("_matchers",)

    def __init__(self, matchers: tuple[Matcher, ...]) -> None:
        """Initialize table with pre-built matchers.

        Use MatcherTableBuilder or from_pairs() to create instances.
        """
        self._matchers = matchers

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[ConstructorSpec, PatternSpec]]
    ) -> MatcherTable:
        """Build a table from ``(constructor, pattern)`` pairs in priority order.

        Raises:
            InvalidPatternError: If any pattern is unusable
        """
        return MatcherTableBuilder().extend(pairs).build()

    @property
    def matchers(self) -> tuple[Matcher, ...]:
        """All matchers, highest priority first."""
        return self._matchers

    def lexer(
        self,
        source: str,
        *,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> Lexer:
        """Create a Lexer over ``source`` using this table."""
        from lexico.lexer import Lexer

        return Lexer(source, self, source_file=source_file, config=config)

    def tokenize(
        self,
        source: str,
        *,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> Iterator[Token]:
        """Lazily tokenize ``source``. See Lexer.tokenize()."""
        return self.lexer(source, source_file=source_file, config=config).tokenize()

    def lex(
        self,
        source: str,
        *,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> list[Token]:
        """Tokenize all of ``source``. See Lexer.collect()."""
        return self.lexer(source, source_file=source_file, config=config).collect()

    def __iter__(self) -> Iterator[Matcher]:
        return iter(self._matchers)

    def __getitem__(self, index: int) -> Matcher:
        return self._matchers[index]

    def __len__(self) -> int:
        """Number of matchers."""
        return len(self._matchers)

    def __repr__(self) -> str:
        return f"MatcherTable({len(self._matchers)} matchers)"


class MatcherTableBuilder:
    """Mutable builder for MatcherTable.

    Matchers are kept in registration order, which is priority order.
    Patterns are validated as they are registered, so a bad pattern fails
    before any input is scanned.

    Example:
        >>> from lexico.patterns import regex
        >>> builder = MatcherTableBuilder()
        >>> _ = builder.token("if", "if").token("ident", regex(r"[a-z]+"))
        >>> len(builder.build())
        2
    """

    __slots__ = ("_matchers",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._matchers: list[Matcher] = []

    def add(self, constructor: ConstructorSpec, pattern: PatternSpec) -> MatcherTableBuilder:
        """Register a matcher with the lowest priority so far.

        Args:
            constructor: SKIP/None, a callable, or a fixed kind
            pattern: Literal string, compiled expression, or Pattern

        Returns:
            Self for chaining

        Raises:
            InvalidPatternError: If the pattern is unusable
        """
        self._matchers.append(Matcher.of(constructor, pattern))
        return self

    def token(self, kind: ConstructorSpec, pattern: PatternSpec) -> MatcherTableBuilder:
        """Register a token-producing matcher.

        Raises:
            ValueError: If ``kind`` is SKIP or None; use skip() instead
        """
        if kind is None or kind is SKIP:
            msg = "token() needs a kind or constructor; use skip() for skip patterns"
            raise ValueError(msg)
        return self.add(kind, pattern)

    def skip(self, pattern: PatternSpec) -> MatcherTableBuilder:
        """Register a skip matcher (whitespace, comments)."""
        return self.add(SKIP, pattern)

    def extend(
        self, pairs: Iterable[tuple[ConstructorSpec, PatternSpec]]
    ) -> MatcherTableBuilder:
        """Register ``(constructor, pattern)`` pairs in order.

        Returns:
            Self for chaining
        """
        for constructor, pattern in pairs:
            self.add(constructor, pattern)
        return self

    def build(self) -> MatcherTable:
        """Build immutable table from registered matchers.

        Literal matchers that can never win because an earlier literal is a
        prefix of them (``"="`` registered before ``"=="``) are logged as
        warnings.

        Returns:
            Immutable MatcherTable
        """
        matchers = tuple(self._matchers)
        _warn_shadowed_literals(matchers)
        logger.debug(
            "Built matcher table: %d matchers (%d skip)",
            len(matchers),
            sum(1 for m in matchers if m.skips),
        )
        return MatcherTable(matchers)

    def __len__(self) -> int:
        """Number of registered matchers."""
        return len(self._matchers)


def _warn_shadowed_literals(matchers: tuple[Matcher, ...]) -> None:
    seen: list[tuple[int, str]] = []
    for index, matcher in enumerate(matchers):
        if not isinstance(matcher.pattern, Literal):
            continue
        text = matcher.pattern.text
        for earlier_index, earlier in seen:
            if text.startswith(earlier):
                logger.warning(
                    "Literal %r at index %d never matches under priority resolution: "
                    "%r at index %d is a prefix of it",
                    text,
                    index,
                    earlier,
                    earlier_index,
                )
                break
        seen.append((index, text))
