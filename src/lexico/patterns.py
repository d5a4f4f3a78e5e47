"""Patterns: the matchable units a lexer tries at its cursor.

Two kinds of pattern exist:

- Literal: matches an exact string.
- Regex: matches a compiled regular expression anchored at the cursor.

A pattern never consumes zero characters. Construction rejects patterns that
could only ever match the empty string, and an empty regex match at scan time
is reported as no match, so the lexer always makes progress.

Usage:
    >>> from lexico.patterns import as_pattern, regex
    >>> as_pattern("+").try_match("1+2", 1)
    1
    >>> regex(r"\\d+").try_match("1+23", 2)
    2
    >>> regex(r"\\d+").try_match("1+23", 1) is None
    True

Thread Safety:
Patterns are frozen and compiled expressions are immutable.
Safe to share across threads.

"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from lexico.errors import InvalidPatternError

# Anchors that pin an expression to the start of the *string*. Matching runs
# at the cursor via ``Pattern.match(source, pos)``, where these would fail
# for every position but 0, so a leading one is dropped.
_LEADING_ANCHORS = ("\\A", "^")


def _has_start_anchor(expression: str) -> bool:
    """True if ``expression`` contains ``^`` or ``\\A`` outside a character set.

    Conservative: a ``^`` inside a verbose-mode comment also counts.
    """
    in_set = False
    i = 0
    while i < len(expression):
        char = expression[i]
        if char == "\\":
            if not in_set and expression[i + 1 : i + 2] == "A":
                return True
            i += 2
            continue
        if in_set:
            if char == "]":
                in_set = False
        elif char == "[":
            in_set = True
            # A "^" negating the set, and a "]" right after it, are not special
            if expression[i + 1 : i + 2] == "^":
                i += 1
            if expression[i + 1 : i + 2] == "]":
                i += 1
        elif char == "^":
            return True
        i += 1
    return False


@dataclass(frozen=True, slots=True)
class Literal:
    """Exact string pattern.

    Regex metacharacters have no special meaning: ``Literal(".")`` matches
    a dot and nothing else.

    Attributes:
        text: The string to match (non-empty)
    """

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise InvalidPatternError(self.text, "literal must be a string")
        if not self.text:
            raise InvalidPatternError(self.text, "literal must not be empty")

    def try_match(self, source: str, pos: int) -> int | None:
        """Return the literal's length if ``source`` has it at ``pos``."""
        if source.startswith(self.text, pos):
            return len(self.text)
        return None

    def __str__(self) -> str:
        return repr(self.text)


@dataclass(frozen=True, slots=True)
class Regex:
    """Regular expression pattern anchored at the cursor.

    The match length is the length of group 0; capture groups are ignored.

    A leading ``^`` or ``\\A`` is removed. Lookbehind assertions and ``\\b``
    then see the text before the cursor, so ``(?<=\\.)\\w+`` only matches
    after a dot.

    Start anchors elsewhere in the expression (``^a|^b``, ``(?i)^if``,
    ``(?:^\\d)``) are kept and refer to the cursor: such expressions are
    matched against the remaining text ``source[pos:]``. In that mode the
    text before the cursor is invisible to lookbehind, and each attempt
    copies the rest of the source.

    Attributes:
        compiled: Compiled ``str`` expression
    """

    compiled: re.Pattern[str]
    _sliced: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        compiled = self.compiled
        if not isinstance(compiled, re.Pattern):
            raise InvalidPatternError(compiled, "expected a compiled regular expression")
        if isinstance(compiled.pattern, bytes):
            raise InvalidPatternError(compiled.pattern, "bytes expressions are not supported")

        for anchor in _LEADING_ANCHORS:
            if compiled.pattern.startswith(anchor):
                compiled = _compile(compiled.pattern[len(anchor) :], compiled.flags)
                object.__setattr__(self, "compiled", compiled)
                break

        if compiled.fullmatch("") is not None:
            raise InvalidPatternError(compiled.pattern, "expression matches the empty string")
        object.__setattr__(self, "_sliced", _has_start_anchor(compiled.pattern))

    @property
    def expression(self) -> str:
        """The (anchor-stripped) expression source."""
        return self.compiled.pattern

    @property
    def sliced(self) -> bool:
        """True if the expression is matched against ``source[pos:]``."""
        return self._sliced

    def try_match(self, source: str, pos: int) -> int | None:
        """Return the length of the match starting at ``pos``, if any.

        Empty matches count as no match.
        """
        if self._sliced:
            match = self.compiled.match(source[pos:])
            start = 0
        else:
            match = self.compiled.match(source, pos)
            start = pos
        if match is None:
            return None
        return (match.end() - start) or None

    def __str__(self) -> str:
        return f"/{self.compiled.pattern}/"


type Pattern = Literal | Regex


def _compile(expression: str, flags: int = 0) -> re.Pattern[str]:
    try:
        return re.compile(expression, flags)
    except re.error as e:
        raise InvalidPatternError(expression, str(e)) from e


def literal(text: str) -> Literal:
    """Build a literal pattern."""
    return Literal(text)


def regex(expression: str, flags: int = 0) -> Regex:
    """Compile ``expression`` into a regex pattern.

    Args:
        expression: Regular expression source
        flags: ``re`` flags (e.g. ``re.IGNORECASE``)

    Returns:
        Regex pattern

    Raises:
        InvalidPatternError: If the expression does not compile or can
            match the empty string
    """
    return Regex(_compile(expression, flags))


def as_pattern(obj: str | re.Pattern[str] | Pattern) -> Pattern:
    """Convert a pattern specification into a Pattern.

    - ``str`` becomes a Literal (never a regex)
    - a compiled ``re.Pattern`` becomes a Regex
    - an existing Literal or Regex is returned unchanged

    Raises:
        InvalidPatternError: For any other object
    """
    if isinstance(obj, (Literal, Regex)):
        return obj
    if isinstance(obj, str):
        return Literal(obj)
    if isinstance(obj, re.Pattern):
        return Regex(obj)
    raise InvalidPatternError(obj, f"cannot use {type(obj).__name__} as a pattern")
