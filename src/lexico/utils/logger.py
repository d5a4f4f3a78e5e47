"""Logging helpers for lexico.

Every logger lives under the ``lexico`` namespace. The package attaches only
a NullHandler; applications decide where records go, for example with
``logging.getLogger("lexico").setLevel(logging.DEBUG)``.

Records emitted:
- DEBUG ``lexico.matchers``: matcher table built
- WARNING ``lexico.matchers``: a literal that can never match
- DEBUG ``lexico.lexer.core``: lexer halted by an error

Example:
    >>> from lexico.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Built matcher table")
"""

from __future__ import annotations

import logging

LOGGER_NAME = "lexico"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``lexico`` namespace.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("mymodule").name
        'lexico.mymodule'
        >>> get_logger("lexico.lexer.core").name
        'lexico.lexer.core'
    """
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
