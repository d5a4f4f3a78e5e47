"""Table-driven lexer for lexico.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerState, resolvers
├── core.py              # Lexer class (scan loop + cursor)
├── modes.py             # LexerState enum
└── resolution.py        # Priority and longest-match resolvers

Usage:
    >>> from lexico import MatcherTable, regex
    >>> from lexico.lexer import Lexer
    >>> table = MatcherTable.from_pairs([(int, regex(r"\\d+")), (None, " ")])
    >>> [token.kind for token in Lexer("4 2", table)]
    [4, 2]

"""

from lexico.lexer.core import Lexer
from lexico.lexer.modes import LexerState
from lexico.lexer.resolution import RESOLVERS, resolve_longest, resolve_priority

__all__ = ["RESOLVERS", "Lexer", "LexerState", "resolve_longest", "resolve_priority"]
