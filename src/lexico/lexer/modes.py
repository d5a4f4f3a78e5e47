"""Lexer states.

The lexer is a two-state machine: it scans until input runs out or an error
stops it, and then it stays halted.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerState(Enum):
    """Lexer states.

    - SCANNING: More input may produce tokens
    - HALTED: Input exhausted or an error was raised; terminal

    """

    SCANNING = auto()
    HALTED = auto()
