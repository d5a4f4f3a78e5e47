"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

from lexico import SKIP, MatcherTable, regex


@pytest.fixture
def expression_table() -> MatcherTable:
    """Calculator-style table: skips, operators, numbers and names."""
    return MatcherTable.from_pairs(
        [
            (SKIP, regex(r"\s+")),
            (SKIP, regex(r"#[^\n]*")),
            ("==", "=="),
            ("=", "="),
            ("op", regex(r"[-+*/%()<>]")),
            ("number", regex(r"\d+(?:\.\d+)?")),
            ("name", regex(r"[A-Za-z_]\w*")),
        ]
    )


@pytest.fixture
def keyword_table() -> MatcherTable:
    """Table with many literal keywords ahead of the identifier regex."""
    keywords = [
        "and", "as", "assert", "break", "class", "continue", "def", "elif",
        "else", "except", "finally", "for", "from", "if", "import", "in",
        "is", "lambda", "not", "or", "pass", "raise", "return", "try",
        "while", "with", "yield",
    ]  # fmt: skip
    pairs: list[tuple[object, object]] = [(SKIP, regex(r"\s+"))]
    pairs += [(kw.upper(), regex(rf"{kw}\b")) for kw in keywords]
    pairs += [("name", regex(r"[A-Za-z_]\w*")), ("punct", regex(r"[():,.=]"))]
    return MatcherTable.from_pairs(pairs)


@pytest.fixture
def large_document() -> str:
    """Generate a large program-like document (~100KB)."""
    sections = []
    for i in range(1500):
        sections.append(
            f"x{i} = (y{i} + {i}) * 3.5 - z / {i + 1}  # step {i}\n"
            f"flag{i} = x{i} == {i * 2}\n"
        )
    return "".join(sections)


@pytest.fixture
def python_like_source() -> str:
    """Keyword-heavy source (~50KB)."""
    block = (
        "def handler(event, context):\n"
        "    if event.kind is not None and context.ready:\n"
        "        for item in event.items:\n"
        "            yield item\n"
        "    else:\n"
        "        return lambda value: value\n"
    )
    return block * 300
