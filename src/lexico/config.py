"""ContextVar-based lexer configuration for lexico.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, when it is created; changing the
config afterwards does not affect lexers that already exist.

Thread Safety:
    Each thread (and each asyncio task) sees its own value, and a LexConfig
    is immutable, so lexers on different threads never share mutable config.

Usage:
    from lexico.config import LexConfig, Resolution, lex_config_context

    with lex_config_context(LexConfig(resolution=Resolution.LONGEST)):
        tokens = table.lex(source)

    # Or per lexer
    lexer = Lexer(source, table, config=LexConfig(snippet_width=8))

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Resolution(Enum):
    """How the lexer picks between matchers that match at the same position.

    - PRIORITY: the first matcher in table order wins, whatever its length
    - LONGEST: the longest match wins; ties go to the earlier matcher

    """

    PRIORITY = "priority"
    LONGEST = "longest"


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Note: source_file is per-call state and stays on the Lexer instance.

    Attributes:
        resolution: Matcher resolution policy
        snippet_width: Number of characters quoted in unrecognized-input
            error messages (at least 1)

    """

    resolution: Resolution = Resolution.PRIORITY
    snippet_width: int = 1

    def __post_init__(self) -> None:
        resolution = self.resolution
        if not isinstance(resolution, Resolution):
            if isinstance(resolution, str) and resolution.upper() in Resolution.__members__:
                resolution = Resolution[resolution.upper()]
            else:
                resolution = Resolution(resolution)
            object.__setattr__(self, "resolution", resolution)
        if self.snippet_width < 1:
            msg = f"snippet_width must be at least 1, got {self.snippet_width}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> LexConfig:
        """Create LexConfig from a mapping.

        Useful when config comes from external sources (TOML, YAML, CLI flags).
        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored. ``resolution`` may be given by name or value
        (``"longest"``, ``"LONGEST"``) or as a Resolution member.

        Args:
            config_dict: Mapping with config values. Keys should match
                LexConfig attribute names.

        Returns:
            New LexConfig instance with values from the mapping.

        Example:
            >>> config = LexConfig.from_dict({
            ...     "resolution": "longest",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.resolution
            <Resolution.LONGEST: 'longest'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar("lex_config", default=_DEFAULT_CONFIG)


def get_lex_config() -> LexConfig:
    """Return the config a Lexer created now would capture."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Make ``config`` the one new lexers in this context capture.

    Lexers that already exist keep the config they were created with.
    Other threads and asyncio tasks started earlier are unaffected.
    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Go back to priority resolution and one-character error snippets."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Use ``config`` for lexers created inside the block.

    The lexer takes its snapshot when it is constructed, so a lexer built
    inside the block keeps ``config`` after the block exits, and one built
    before the block never sees it. The previous config comes back even if
    the block raises.

    Example:
        >>> with lex_config_context(LexConfig(resolution=Resolution.LONGEST)):
        ...     get_lex_config().resolution
        <Resolution.LONGEST: 'longest'>
        >>> get_lex_config().resolution
        <Resolution.PRIORITY: 'priority'>
    """
    token = _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.reset(token)


__all__ = [
    "LexConfig",
    "Resolution",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
