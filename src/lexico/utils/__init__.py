"""Utility modules for lexico.

Provides:
- text: position bookkeeping and error snippets
- logger: get_logger for logging
"""

from lexico.utils.logger import get_logger
from lexico.utils.text import advance_position, visible_snippet

__all__ = [
    "advance_position",
    "get_logger",
    "visible_snippet",
]
