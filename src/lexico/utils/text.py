"""Text helpers shared by the lexer and its error messages.

Example:
    >>> from lexico.utils.text import advance_position
    >>> advance_position("ab\\ncd", 1, 1)
    (2, 3)
"""

from __future__ import annotations


def advance_position(text: str, lineno: int, col: int) -> tuple[int, int]:
    """Move a 1-indexed (line, column) pair past ``text``.

    Only ``\\n`` starts a new line; a ``\\r`` is an ordinary character.

    Args:
        text: The text being consumed
        lineno: Line number before ``text`` (1-indexed)
        col: Column before ``text`` (1-indexed)

    Returns:
        The (line, column) immediately after ``text``.

    Examples:
        >>> advance_position("", 3, 7)
        (3, 7)
        >>> advance_position("abc", 1, 1)
        (1, 4)
        >>> advance_position("a\\n\\nb", 1, 5)
        (3, 2)
    """
    newlines = text.count("\n")
    if not newlines:
        return lineno, col + len(text)
    return lineno + newlines, len(text) - text.rfind("\n")


def visible_snippet(source: str, pos: int, width: int = 1) -> str:
    """Quote up to ``width`` characters of ``source`` starting at ``pos``.

    Control characters are escaped so the snippet stays on one line.

    Examples:
        >>> visible_snippet("1 @ 2", 2)
        "'@'"
        >>> visible_snippet("a\\tb", 1, 2)
        "'\\\\tb'"
        >>> visible_snippet("abc", 3)
        'end of input'
    """
    fragment = source[pos : pos + width]
    if not fragment:
        return "end of input"
    return repr(fragment)
