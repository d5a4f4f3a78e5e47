"""Benchmark lexer throughput.

Run with:
    pytest benchmarks/benchmark_lexer.py -v --benchmark-only

Compare resolution strategies with:
    pytest benchmarks/benchmark_lexer.py --benchmark-only --benchmark-group-by=group
"""

from __future__ import annotations

import pytest

from lexico import LexConfig, Lexer, MatcherTable, Resolution


@pytest.mark.benchmark(group="lex-expressions")
def test_benchmark_priority(benchmark, expression_table: MatcherTable, large_document: str):
    """Default priority resolution over a large document."""
    tokens = benchmark(expression_table.lex, large_document)
    assert tokens


@pytest.mark.benchmark(group="lex-expressions")
def test_benchmark_longest(benchmark, expression_table: MatcherTable, large_document: str):
    """Longest-match resolution tries every matcher at every position."""
    config = LexConfig(resolution=Resolution.LONGEST)

    def lex_longest():
        return Lexer(large_document, expression_table, config=config).collect()

    tokens = benchmark(lex_longest)
    assert tokens


@pytest.mark.benchmark(group="lex-keywords")
def test_benchmark_keywords(benchmark, keyword_table: MatcherTable, python_like_source: str):
    """Many keyword regexes ahead of a catch-all identifier."""
    tokens = benchmark(keyword_table.lex, python_like_source)
    assert tokens


@pytest.mark.benchmark(group="lex-streaming")
def test_benchmark_streaming_count(
    benchmark, expression_table: MatcherTable, large_document: str
):
    """Lazy tokenization without keeping tokens alive."""

    def count_tokens():
        return sum(1 for _ in expression_table.tokenize(large_document))

    assert benchmark(count_tokens) > 0


@pytest.mark.benchmark(group="table-build")
def test_benchmark_table_build(benchmark):
    """Building a table compiles and validates every pattern."""
    pairs = [(f"kw{i}", f"keyword{i:03d}") for i in range(200)]
    table = benchmark(MatcherTable.from_pairs, pairs)
    assert len(table) == 200
