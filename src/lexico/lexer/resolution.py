"""Matcher resolution strategies.

A resolver looks at every candidate matcher at one cursor position and picks
the one whose match the lexer consumes.

Both strategies are pure functions of (matchers, source, position).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from lexico.config import Resolution
from lexico.matchers import Matcher

type Resolver = Callable[[Sequence[Matcher], str, int], tuple[Matcher, int] | None]


def resolve_priority(
    matchers: Sequence[Matcher], source: str, pos: int
) -> tuple[Matcher, int] | None:
    """First matcher (lowest index) that matches at ``pos`` wins.

    Later matchers are not tried once one matches, so a longer match further
    down the table never pre-empts an earlier one.

    Returns:
        (matcher, match length), or None if nothing matches

    Complexity: O(len(matchers)) pattern calls in the worst case
    """
    for matcher in matchers:
        length = matcher.pattern.try_match(source, pos)
        if length is not None:
            return matcher, length
    return None


def resolve_longest(
    matchers: Sequence[Matcher], source: str, pos: int
) -> tuple[Matcher, int] | None:
    """Longest match at ``pos`` wins; ties go to the lowest index.

    Returns:
        (matcher, match length), or None if nothing matches

    Complexity: exactly len(matchers) pattern calls
    """
    best: tuple[Matcher, int] | None = None
    for matcher in matchers:
        length = matcher.pattern.try_match(source, pos)
        if length is not None and (best is None or length > best[1]):
            best = (matcher, length)
    return best


RESOLVERS: dict[Resolution, Resolver] = {
    Resolution.PRIORITY: resolve_priority,
    Resolution.LONGEST: resolve_longest,
}
