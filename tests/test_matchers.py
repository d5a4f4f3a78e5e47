"""Tests for lexico.matchers: constructors, matchers and the matcher table."""

from __future__ import annotations

import logging
import pickle
from dataclasses import dataclass
from enum import Enum

import pytest

from lexico import SKIP, InvalidPatternError, Matcher, MatcherTable, MatcherTableBuilder, fixed
from lexico.lexer import Lexer
from lexico.matchers import Fixed
from lexico.patterns import Literal, Regex, regex


class Keyword(Enum):
    IF = "if"
    ELSE = "else"


@dataclass(frozen=True)
class Ident:
    name: str


class TestMatcherOf:
    """Normalization of constructor specs."""

    def test_skip_sentinel(self) -> None:
        matcher = Matcher.of(SKIP, " ")
        assert matcher.skips
        assert matcher.create is None

    def test_none_is_skip(self) -> None:
        assert Matcher.of(None, " ").skips

    def test_fixed_value(self) -> None:
        matcher = Matcher.of(Keyword.IF, "if")
        assert not matcher.skips
        assert isinstance(matcher.create, Fixed)
        assert matcher.create("if") is Keyword.IF
        assert matcher.create("anything") is Keyword.IF

    def test_callable_is_constructor(self) -> None:
        matcher = Matcher.of(Ident, regex(r"[a-z]+"))
        assert matcher.create is Ident
        assert matcher.create("abc") == Ident("abc")

    def test_fixed_wraps_callables(self) -> None:
        matcher = Matcher.of(fixed(Ident), "x")
        assert matcher.create("x") is Ident

    def test_pattern_conversion(self) -> None:
        assert isinstance(Matcher.of("a", "a").pattern, Literal)
        assert isinstance(Matcher.of("a", regex("a+")).pattern, Regex)

    def test_invalid_pattern(self) -> None:
        with pytest.raises(InvalidPatternError):
            Matcher.of("a", "")

    def test_repr(self) -> None:
        assert repr(Matcher.of(SKIP, " ")) == "Matcher(' ', SKIP)"
        assert repr(Matcher.of(Keyword.IF, "if")) == "Matcher('if', <Keyword.IF: 'if'>)"
        assert repr(Matcher.of(Ident, regex("[a-z]+"))) == "Matcher(/[a-z]+/, Ident)"


class TestSkipSentinel:
    def test_repr(self) -> None:
        assert repr(SKIP) == "SKIP"

    def test_pickle_preserves_identity(self) -> None:
        assert pickle.loads(pickle.dumps(SKIP)) is SKIP


class TestMatcherTableBuilder:
    """Mutable construction of matcher tables."""

    def test_registration_order_is_priority_order(self) -> None:
        table = (
            MatcherTableBuilder()
            .token(Keyword.IF, "if")
            .token(Ident, regex(r"[a-z]+"))
            .skip(regex(r"\s+"))
            .build()
        )

        assert len(table) == 3
        assert table[0].create("if") is Keyword.IF
        assert table[2].skips
        assert [t.kind for t in table.lex("if iffy")] == [Keyword.IF, Keyword.IF, Ident("fy")]

    def test_token_rejects_skip(self) -> None:
        builder = MatcherTableBuilder()
        with pytest.raises(ValueError, match="skip"):
            builder.token(SKIP, " ")
        with pytest.raises(ValueError):
            builder.token(None, " ")

    def test_bad_pattern_fails_at_registration(self) -> None:
        builder = MatcherTableBuilder()
        with pytest.raises(InvalidPatternError):
            builder.token("x", "")
        assert len(builder) == 0

    def test_extend(self) -> None:
        builder = MatcherTableBuilder().extend([("a", "a"), (SKIP, " ")])
        assert len(builder) == 2

    def test_build_snapshots_registrations(self) -> None:
        builder = MatcherTableBuilder().token("a", "a")
        table = builder.build()
        builder.token("b", "b")

        assert len(table) == 1
        assert len(builder.build()) == 2

    def test_build_logs_table_size(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="lexico"):
            MatcherTableBuilder().token("a", "a").skip(" ").build()
        assert "2 matchers (1 skip)" in caplog.text

    def test_shadowed_literal_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="lexico"):
            MatcherTableBuilder().token("assign", "=").token("eq", "==").build()

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.name == "lexico.matchers"
        assert "'=='" in record.getMessage()
        assert "never matches" in record.getMessage()

    def test_no_warning_when_longer_literal_first(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="lexico"):
            MatcherTableBuilder().token("eq", "==").token("assign", "=").build()
        assert caplog.records == []


class TestMatcherTable:
    """Immutable table behavior."""

    def test_from_pairs(self) -> None:
        table = MatcherTable.from_pairs([(Keyword.ELSE, "else"), (SKIP, " ")])
        assert isinstance(table, MatcherTable)
        assert [m.skips for m in table] == [False, True]

    def test_matchers_is_tuple(self) -> None:
        table = MatcherTable.from_pairs([("a", "a")])
        assert isinstance(table.matchers, tuple)

    def test_lexer_factory(self) -> None:
        table = MatcherTable.from_pairs([("a", "a")])
        lexer = table.lexer("aa", source_file="a.txt")
        assert isinstance(lexer, Lexer)
        assert lexer.table is table
        assert lexer.source_file == "a.txt"

    def test_tokenize_is_lazy(self) -> None:
        table = MatcherTable.from_pairs([("a", "a")])
        stream = table.tokenize("a?")
        assert next(stream).kind == "a"

    def test_shared_by_many_lexers(self) -> None:
        table = MatcherTable.from_pairs([("a", "a"), ("b", "b")])
        first = table.lexer("ab")
        second = table.lexer("ba")
        assert next(first).kind == "a"
        assert next(second).kind == "b"
        assert next(first).kind == "b"

    def test_repr(self) -> None:
        assert repr(MatcherTable.from_pairs([("a", "a")])) == "MatcherTable(1 matchers)"
